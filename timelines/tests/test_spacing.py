from django.test import SimpleTestCase

from timelines.layout.spacing import (
    COMPACT,
    COMPACT_SPACING,
    MAX_SPACING,
    MIN_SPACING,
    TIMESCALE,
    compact_spacing,
    event_icon,
    list_view_entries,
    proportional_spacing,
    sort_chronologically,
    spacing_for_mode,
)


class ProportionalSpacingTests(SimpleTestCase):

    def test_equal_gaps_use_minimum(self):
        # Gaps of 5, 5, 5
        self.assertEqual(proportional_spacing([0, 5, 10, 15]), [0, 16, 16, 16])

    def test_gaps_scale_into_range(self):
        spacing = proportional_spacing([0, 1, 11, 6.5 + 11])
        self.assertEqual(spacing[0], 0)
        self.assertEqual(spacing[1], MIN_SPACING)
        self.assertAlmostEqual(spacing[2], MAX_SPACING)
        self.assertAlmostEqual(spacing[3], MIN_SPACING + (6.5 - 1) / 9 * (MAX_SPACING - MIN_SPACING))

    def test_every_gap_within_bounds(self):
        spacing = proportional_spacing([-500, -20, 0, 3, 1200, 1201])
        for value in spacing[1:]:
            self.assertGreaterEqual(value, MIN_SPACING)
            self.assertLessEqual(value, MAX_SPACING)

    def test_short_sequences(self):
        self.assertEqual(proportional_spacing([]), [])
        self.assertEqual(proportional_spacing([7]), [0])
        self.assertEqual(proportional_spacing([1, 2]), [0, MIN_SPACING])


class ModeTests(SimpleTestCase):

    def test_compact_ignores_time(self):
        self.assertEqual(compact_spacing(3), [0, COMPACT_SPACING, COMPACT_SPACING])
        self.assertEqual(compact_spacing(0), [])
        self.assertEqual(spacing_for_mode([0, 1, 100], COMPACT), [0, COMPACT_SPACING, COMPACT_SPACING])

    def test_timescale_uses_proportional_spacing(self):
        spacing = spacing_for_mode([0, 1, 100], TIMESCALE)
        self.assertEqual(spacing[:2], [0, MIN_SPACING])
        self.assertAlmostEqual(spacing[2], MAX_SPACING)

    def test_event_icons(self):
        self.assertEqual(event_icon('battle'), 'sparkles')
        self.assertEqual(event_icon('Historical'), 'clock')
        self.assertEqual(event_icon('journey'), 'location-marker')
        self.assertEqual(event_icon(None), 'calendar')
        self.assertEqual(event_icon('birth'), 'calendar')


class ListViewTests(SimpleTestCase):

    def test_sort_chronologically(self):
        events = [
            {'id': 1, 'startDate': 'Year 3'},
            {'id': 2, 'startDate': '500 BCE'},
            {'id': 3, 'startDate': 'Year 1, Day 40'},
        ]
        self.assertEqual([e['id'] for e in sort_chronologically(events)], [2, 3, 1])

    def test_entries_carry_spacing_and_icon(self):
        events = [
            {'id': 1, 'startDate': 'Year 10', 'eventType': 'battle'},
            {'id': 2, 'startDate': 'Year 1'},
            {'id': 3, 'startDate': 'Year 2'},
        ]
        entries = list_view_entries(events, TIMESCALE)

        self.assertEqual([entry.event['id'] for entry in entries], [2, 3, 1])
        self.assertEqual([entry.spacing for entry in entries][:2], [0, MIN_SPACING])
        self.assertAlmostEqual(entries[2].spacing, MAX_SPACING)
        self.assertEqual(entries[2].icon, 'sparkles')
        self.assertEqual(entries[0].timestamp, 1.0)
