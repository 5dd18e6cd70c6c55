import os
import sys
import django

# Set up Django environment
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'storyworld_project.settings')
django.setup()

from timelines.canvas import TimelineCanvas
from timelines.models import Timeline


def relayout_all(timeline_ids=None):
    """Runs 'Auto Layout' on every timeline (or just the given ids)."""
    timelines = Timeline.objects.all()
    if timeline_ids:
        timelines = timelines.filter(pk__in=timeline_ids)
    print(f"Found {timelines.count()} timelines.")

    failed = 0
    for count, timeline in enumerate(timelines, start=1):
        canvas = TimelineCanvas(timeline)
        result = canvas.auto_layout()
        failed += len(canvas.failed_writes)
        print(f"[{count}] {timeline.name}: {len(result.writes)} events placed")
        if canvas.failed_writes:
            print(f"    Failed to save events: {canvas.failed_writes}")
    return failed


if __name__ == "__main__":
    ids = [int(arg) for arg in sys.argv[1:]]
    failures = relayout_all(ids)
    print("Done!" if not failures else f"Done with {failures} failed writes.")
    sys.exit(1 if failures else 0)
