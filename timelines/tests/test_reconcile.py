from django.test import SimpleTestCase

from timelines.layout.reconcile import (
    AUTO,
    MANUAL,
    AutoLayoutRequested,
    EventsRefreshed,
    LayoutInput,
    LayoutState,
    NodeDragged,
    NodePlacement,
    layout_input_for,
    placement_from_input,
    reduce_layout,
    should_auto_layout,
)


def _event(event_id, year):
    return LayoutInput(event_id, timestamp=float(year), date_text=f'Year {year}')


class ReduceLayoutTests(SimpleTestCase):

    def setUp(self):
        self.events = tuple(_event(name, year) for year, name in enumerate('ABCDE', start=1))
        self.initial = reduce_layout(LayoutState(), EventsRefreshed(self.events))

    def test_first_refresh_lays_everything_out(self):
        result = self.initial
        self.assertTrue(result.relaid_out)
        self.assertEqual(len(result.writes), 5)
        self.assertEqual(result.state.last_observed_count, 5)
        for placement in result.state.placements:
            self.assertEqual(placement.mode, AUTO)
            self.assertTrue(placement.has_position)

    def test_refresh_without_changes_is_a_no_op(self):
        result = reduce_layout(self.initial.state, EventsRefreshed(self.events))
        self.assertFalse(result.relaid_out)
        self.assertEqual(result.writes, ())
        self.assertEqual(result.state, self.initial.state)

    def test_dragged_node_survives_adding_an_event(self):
        dragged = reduce_layout(self.initial.state, NodeDragged('E', 400, 250))
        self.assertEqual(len(dragged.writes), 1)
        self.assertEqual(dragged.writes[0].mode, MANUAL)
        self.assertFalse(dragged.state.auto_layout_enabled)

        with_f = self.events + (_event('F', 10),)
        result = reduce_layout(dragged.state, EventsRefreshed(with_f))

        e = result.state.placement_for('E')
        self.assertEqual((e.mode, e.x, e.y), (MANUAL, 400, 250))
        self.assertTrue(result.state.placement_for('F').has_position)
        self.assertEqual([write.event_id for write in result.writes], ['F'])
        self.assertFalse(result.relaid_out)

    def test_growth_relays_out_auto_nodes(self):
        before = self.initial.state.placement_for('E')
        result = reduce_layout(self.initial.state, EventsRefreshed(self.events + (_event('F', 9),)))

        self.assertTrue(result.relaid_out)
        self.assertEqual(result.state.last_observed_count, 6)
        # E is no longer the latest event, so it moves left
        self.assertLess(result.state.placement_for('E').x, before.x)

    def test_shrinking_does_not_relayout(self):
        result = reduce_layout(self.initial.state, EventsRefreshed(self.events[:3]))
        self.assertFalse(result.relaid_out)
        self.assertEqual(result.writes, ())
        self.assertEqual(result.state.last_observed_count, 3)
        self.assertIsNone(result.state.placement_for('E'))

    def test_dragged_node_survives_removal_then_addition(self):
        state = reduce_layout(self.initial.state, NodeDragged('E', 400, 250)).state

        without_a = self.events[1:]
        removed = reduce_layout(state, EventsRefreshed(without_a))
        e = removed.state.placement_for('E')
        self.assertEqual((e.mode, e.x, e.y), (MANUAL, 400, 250))
        self.assertEqual(removed.state.last_observed_count, 4)

        added = reduce_layout(removed.state, EventsRefreshed(without_a + (_event('F', 10),)))
        e = added.state.placement_for('E')
        self.assertEqual((e.mode, e.x, e.y), (MANUAL, 400, 250))
        self.assertNotIn('E', [write.event_id for write in added.writes])

    def test_known_manual_placement_without_coordinates_is_laid_out(self):
        state = LayoutState(
            placements=(NodePlacement('A', AUTO, 100.0, 220.0), NodePlacement('B', MANUAL)),
            last_observed_count=2,
            auto_layout_enabled=False,
        )
        events = (_event('A', 1), _event('B', 2))
        result = reduce_layout(state, EventsRefreshed(events))

        b = result.state.placement_for('B')
        self.assertEqual(b.mode, AUTO)
        self.assertTrue(b.has_position)
        self.assertEqual([(w.event_id, w.mode) for w in result.writes], [('B', AUTO)])

    def test_auto_layout_resets_manual_nodes(self):
        dragged = reduce_layout(self.initial.state, NodeDragged('E', 400, 250))
        result = reduce_layout(dragged.state, AutoLayoutRequested(self.events))

        self.assertTrue(result.state.auto_layout_enabled)
        self.assertEqual(len(result.writes), 5)
        self.assertEqual({p.mode for p in result.state.placements}, {AUTO})
        self.assertEqual(result.state.placement_for('E'), self.initial.state.placement_for('E'))

    def test_empty_event_set(self):
        result = reduce_layout(self.initial.state, EventsRefreshed(()))
        self.assertEqual(result.state.placements, ())
        self.assertEqual(result.state.last_observed_count, 0)
        self.assertEqual(result.writes, ())

    def test_drag_of_unknown_or_invalid_is_ignored(self):
        state = self.initial.state
        self.assertEqual(reduce_layout(state, NodeDragged('Z', 1, 2)).state, state)
        self.assertEqual(reduce_layout(state, NodeDragged('A', float('nan'), 2)).state, state)
        self.assertEqual(reduce_layout(state, NodeDragged('A', 'left', 2)).writes, ())

    def test_unknown_action(self):
        with self.assertRaises(TypeError):
            reduce_layout(LayoutState(), object())


class HelperTests(SimpleTestCase):

    def test_should_auto_layout(self):
        self.assertTrue(should_auto_layout(3, 2, True))
        self.assertFalse(should_auto_layout(3, 2, False))
        self.assertFalse(should_auto_layout(2, 2, True))
        self.assertFalse(should_auto_layout(1, 2, True))

    def test_layout_input_from_dict_without_mode(self):
        placed = layout_input_for({'id': 1, 'startDate': 'Year 2', 'positionX': 5, 'positionY': 6})
        unplaced = layout_input_for({'id': 2, 'startDate': 'Year 3'})

        self.assertEqual((placed.mode, placed.x, placed.y, placed.timestamp), (MANUAL, 5, 6, 2.0))
        self.assertEqual(unplaced.mode, AUTO)

    def test_stored_mode_wins_over_coordinates(self):
        class Row:
            pk = 3
            start_date = 'Year 4'
            layout_mode = AUTO
            position_x = 300.0
            position_y = 220.0

        row_input = layout_input_for(Row())
        self.assertEqual((row_input.event_id, row_input.mode), (3, AUTO))
        self.assertEqual(placement_from_input(row_input), NodePlacement(3, AUTO, 300.0, 220.0))

        Row.layout_mode = MANUAL
        Row.position_x = None
        self.assertEqual(placement_from_input(layout_input_for(Row())).mode, AUTO)

    def test_manual_input_without_coordinates_is_laid_out(self):
        event = LayoutInput('X', timestamp=1.0, mode=MANUAL)
        result = reduce_layout(LayoutState(auto_layout_enabled=False), EventsRefreshed((event,)))
        placement = result.state.placement_for('X')
        self.assertEqual(placement.mode, AUTO)
        self.assertTrue(placement.has_position)
