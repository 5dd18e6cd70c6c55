"""
Starter templates offered when a writer creates a new timeline.
"""

TIMELINE_TEMPLATES = [
    {
        'id': 'world-history',
        'name': 'World History',
        'description': 'Track civilizations and major events across ages',
        'timelineType': 'World',
        'timeScale': 'Centuries',
        'defaultView': 'list',
        'suggested': 'Best for tracking civilizations over millennia',
        'exampleUse': 'Rise and fall of empires, technological eras, major world events',
    },
    {
        'id': 'campaign-sessions',
        'name': 'Campaign Sessions',
        'description': 'Plan and track RPG campaign events',
        'timelineType': 'Campaign',
        'timeScale': 'Days',
        'defaultView': 'gantt',
        'suggested': 'Best for RPG session tracking (5-15 sessions)',
        'exampleUse': 'Session planning, quest progression, in-game calendar',
    },
    {
        'id': 'character-biography',
        'name': 'Character Biography',
        'description': "Chronicle a character's life journey",
        'timelineType': 'Character',
        'timeScale': 'Years',
        'defaultView': 'list',
        'suggested': 'Best for individual character lifespans',
        'exampleUse': 'Life milestones, character development, personal history',
    },
    {
        'id': 'plot-structure',
        'name': 'Plot Structure',
        'description': 'Map out story arcs and parallel plotlines',
        'timelineType': 'Plot',
        'timeScale': 'Chapters',
        'defaultView': 'gantt',
        'suggested': 'Best for comparing multiple story arcs',
        'exampleUse': 'Story beats, character arc intersections, subplot timing',
    },
    {
        'id': 'blank',
        'name': 'Blank Timeline',
        'description': 'Start from an empty canvas',
        'timelineType': 'Custom',
        'timeScale': 'Years',
        'defaultView': 'canvas',
        'suggested': 'Best when none of the templates fit',
        'exampleUse': 'Anything else',
    },
]


def get_template(template_id):
    for template in TIMELINE_TEMPLATES:
        if template['id'] == template_id:
            return template
    return None


def apply_template(timeline, template_id):
    """
    Copies a template's type, scale and default view onto an unsaved timeline.
    Fields the writer already filled in are left alone.
    """
    template = get_template(template_id)
    if template is None:
        raise ValueError(f'Unknown timeline template: {template_id}')

    if not timeline.timeline_type:
        timeline.timeline_type = template['timelineType']
    if not timeline.time_scale:
        timeline.time_scale = template['timeScale']
    timeline.default_view = template['defaultView']
    if not timeline.description:
        timeline.description = template['description']
    return timeline
