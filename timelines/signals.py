from django.contrib.auth.models import User
from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from .canvas import EVENT_LAYOUT_FIELDS, TIMELINE_LAYOUT_FIELDS
from .models import Timeline, TimelineEvent, TimelineRelationship, ActivityLog

# Saves touching only these are canvas bookkeeping, not edits
LAYOUT_ONLY_FIELDS = frozenset(EVENT_LAYOUT_FIELDS) | frozenset(TIMELINE_LAYOUT_FIELDS)


def _owner_id(instance):
    if isinstance(instance, Timeline):
        return instance.user_id
    return Timeline.objects.filter(pk=instance.timeline_id).values_list('user_id', flat=True).first()


def _object_name(instance):
    if isinstance(instance, TimelineEvent):
        return instance.title
    if isinstance(instance, Timeline):
        return instance.name
    return str(instance)[:200]


@receiver(post_save, sender=Timeline)
@receiver(post_save, sender=TimelineEvent)
@receiver(post_save, sender=TimelineRelationship)
def log_save_activity(sender, instance, created, update_fields=None, **kwargs):
    if update_fields and set(update_fields) <= LAYOUT_ONLY_FIELDS:
        return

    user_id = _owner_id(instance)
    if user_id:
        ActivityLog.objects.create(
            user_id=user_id,
            action='create' if created else 'update',
            model_name=sender.__name__,
            object_name=_object_name(instance)
        )


@receiver(post_delete, sender=Timeline)
@receiver(post_delete, sender=TimelineEvent)
@receiver(post_delete, sender=TimelineRelationship)
def log_delete_activity(sender, instance, origin=None, **kwargs):
    # The user's own log goes with the account
    if isinstance(origin, User):
        return

    user_id = _owner_id(instance)
    if user_id:
        ActivityLog.objects.create(
            user_id=user_id,
            action='delete',
            model_name=sender.__name__,
            object_name=_object_name(instance)
        )
