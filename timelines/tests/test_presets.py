from django.test import SimpleTestCase

from timelines.models import Timeline
from timelines.presets import apply_template, get_template


class TemplateTests(SimpleTestCase):

    def test_get_template(self):
        self.assertEqual(get_template('plot-structure')['timeScale'], 'Chapters')
        self.assertIsNone(get_template('missing'))

    def test_apply_fills_blank_fields_only(self):
        timeline = Timeline(name='Kings', time_scale='Reigns')
        apply_template(timeline, 'world-history')

        self.assertEqual(timeline.timeline_type, 'World')
        self.assertEqual(timeline.time_scale, 'Reigns')
        self.assertEqual(timeline.default_view, 'list')
        self.assertEqual(timeline.description, 'Track civilizations and major events across ages')

    def test_unknown_template(self):
        with self.assertRaises(ValueError):
            apply_template(Timeline(name='X'), 'missing')
