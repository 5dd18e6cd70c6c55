from django.test import SimpleTestCase

from timelines.layout.relationships import (
    EDGE_STYLES,
    FALLBACK_EDGE_STYLE,
    RELATIONSHIP_TYPES,
    build_edge,
    edge_style,
    resolve_relationship_type,
    style_table,
)


class RelationshipTypeTests(SimpleTestCase):

    def test_blank_defaults_to_related(self):
        self.assertEqual(resolve_relationship_type(None), 'related')
        self.assertEqual(resolve_relationship_type('  '), 'related')

    def test_known_types_are_normalised(self):
        self.assertEqual(resolve_relationship_type(' Causes '), 'causes')

    def test_unknown_type_is_rejected(self):
        with self.assertRaises(ValueError):
            resolve_relationship_type('betrays')


class EdgeStyleTests(SimpleTestCase):

    def test_every_type_has_a_style(self):
        self.assertEqual(set(EDGE_STYLES), set(RELATIONSHIP_TYPES))

    def test_style_table(self):
        self.assertEqual(EDGE_STYLES['causes'].stroke_width, 2)
        self.assertEqual(EDGE_STYLES['causes'].dash, '0')
        self.assertEqual(EDGE_STYLES['precedes'].stroke_width, 1.5)
        self.assertEqual(EDGE_STYLES['concurrent'].dash, '5,5')
        self.assertEqual(EDGE_STYLES['related'].dash, '3,3')
        self.assertEqual(style_table()['related']['stroke_width'], 1)

    def test_unknown_type_falls_back(self):
        self.assertEqual(edge_style('rivalry'), FALLBACK_EDGE_STYLE)

    def test_build_edge(self):
        edge = build_edge({'id': 7, 'fromEventId': 1, 'toEventId': 2, 'relationshipType': 'concurrent'})
        self.assertEqual(edge['source'], 1)
        self.assertEqual(edge['target'], 2)
        self.assertEqual(edge['label'], 'concurrent')
        self.assertEqual(edge['arrows'], 'to')
        self.assertEqual(edge['style'], {
            'stroke': 'hsl(var(--secondary))',
            'strokeWidth': 1.5,
            'strokeDasharray': '5,5',
        })
