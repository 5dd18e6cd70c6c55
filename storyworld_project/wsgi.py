"""
WSGI config for storyworld_project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'storyworld_project.settings')

application = get_wsgi_application()
