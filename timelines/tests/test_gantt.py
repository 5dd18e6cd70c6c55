from django.test import SimpleTestCase

from timelines.layout.gantt import (
    MIN_BAR_WIDTH,
    ROW_PALETTE,
    TimeRange,
    UNCATEGORIZED,
    bar_position,
    gantt_rows,
    time_range,
)


class TimeRangeTests(SimpleTestCase):

    def test_empty(self):
        self.assertEqual(time_range([]), TimeRange(0.0, 100.0, 100.0))

    def test_single_point_gets_a_window(self):
        self.assertEqual(time_range([{'startDate': 'Year 10'}]), TimeRange(-40.0, 60.0, 100.0))

    def test_padding_includes_end_dates(self):
        bounds = time_range([
            {'startDate': 'Year 0'},
            {'startDate': 'Year 50', 'endDate': 'Year 100'},
        ])
        self.assertAlmostEqual(bounds.min, -5)
        self.assertAlmostEqual(bounds.max, 105)
        self.assertAlmostEqual(bounds.span, 110)


class BarPositionTests(SimpleTestCase):

    def test_bar_with_duration(self):
        bounds = TimeRange(0.0, 100.0, 100.0)
        left, width = bar_position({'startDate': 'Year 20', 'endDate': 'Year 50'}, bounds)
        self.assertAlmostEqual(left, 20)
        self.assertAlmostEqual(width, 30)

    def test_point_event_gets_minimum_width(self):
        bounds = TimeRange(0.0, 100.0, 100.0)
        left, width = bar_position({'startDate': 'Year 20'}, bounds)
        self.assertAlmostEqual(left, 20)
        self.assertEqual(width, MIN_BAR_WIDTH)


class GanttRowsTests(SimpleTestCase):

    def test_rows_grouped_by_category(self):
        events = [
            {'id': 1, 'startDate': 'Year 5', 'category': 'War'},
            {'id': 2, 'startDate': 'Year 1'},
            {'id': 3, 'startDate': 'Year 2', 'category': 'War', 'color': '#ff0000'},
        ]
        rows = gantt_rows(events)

        self.assertEqual([row.category for row in rows], [UNCATEGORIZED, 'War'])
        self.assertEqual([e['id'] for e in rows[1].events], [3, 1])
        self.assertEqual(rows[1].color, '#ff0000')
        self.assertIn(rows[0].color, ROW_PALETTE)
