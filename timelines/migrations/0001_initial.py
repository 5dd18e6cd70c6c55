from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Notebook',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='notebooks', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Timeline',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('timeline_type', models.CharField(blank=True, help_text="e.g. 'World', 'Campaign', 'Character', 'Plot'", max_length=50)),
                ('time_scale', models.CharField(blank=True, help_text="e.g. 'Centuries', 'Years', 'Days', 'Chapters'", max_length=50)),
                ('default_view', models.CharField(choices=[('list', 'List'), ('canvas', 'Canvas'), ('gantt', 'Gantt')], default='canvas', max_length=10)),
                ('list_view_mode', models.CharField(choices=[('compact', 'Compact'), ('timescale', 'Timescale')], default='compact', help_text='Compact spaces list entries evenly; timescale spaces them by elapsed time', max_length=10)),
                ('layout_event_count', models.PositiveIntegerField(default=0, help_text='Number of events seen by the last canvas layout pass')),
                ('auto_layout_enabled', models.BooleanField(default=True, help_text='Re-run the automatic layout when new events are added')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('notebook', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='timelines', to='timelines.notebook')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='timelines', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='TimelineEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('start_date', models.CharField(help_text="Date within your story world (e.g., 'Year 1, Day 5' or '500 BCE')", max_length=100)),
                ('end_date', models.CharField(blank=True, max_length=100)),
                ('event_type', models.CharField(blank=True, choices=[('battle', 'Battle'), ('discovery', 'Discovery'), ('birth', 'Birth'), ('death', 'Death'), ('meeting', 'Meeting'), ('political', 'Political'), ('cultural', 'Cultural'), ('location', 'Location'), ('journey', 'Journey'), ('historical', 'Historical'), ('other', 'Other')], max_length=20)),
                ('importance', models.CharField(choices=[('major', 'Major'), ('moderate', 'Moderate'), ('minor', 'Minor')], default='moderate', max_length=10)),
                ('category', models.CharField(blank=True, max_length=100)),
                ('color', models.CharField(blank=True, help_text='Hex color code (e.g., #3498db)', max_length=7)),
                ('linked_content_type', models.CharField(blank=True, max_length=50)),
                ('linked_content_id', models.CharField(blank=True, max_length=64)),
                ('position_x', models.FloatField(blank=True, null=True)),
                ('position_y', models.FloatField(blank=True, null=True)),
                ('layout_mode', models.CharField(choices=[('auto', 'Automatic'), ('manual', 'Manually placed')], default='auto', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('timeline', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='events', to='timelines.timeline')),
            ],
            options={
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='TimelineRelationship',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('relationship_type', models.CharField(choices=[('causes', 'Causes'), ('precedes', 'Precedes'), ('concurrent', 'Concurrent'), ('related', 'Related')], default='related', max_length=20)),
                ('description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('from_event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='outgoing_relationships', to='timelines.timelineevent')),
                ('timeline', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='relationships', to='timelines.timeline')),
                ('to_event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='incoming_relationships', to='timelines.timelineevent')),
            ],
            options={
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='ActivityLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('action', models.CharField(choices=[('create', 'Created'), ('update', 'Updated'), ('delete', 'Deleted')], max_length=10)),
                ('model_name', models.CharField(max_length=50)),
                ('object_name', models.CharField(max_length=200)),
                ('timestamp', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='activity_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-timestamp'],
            },
        ),
    ]
