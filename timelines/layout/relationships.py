"""
Typed, directed links between timeline events and how each type is drawn.

The graph is deliberately permissive: parallel edges and cycles are allowed.
"""
from dataclasses import asdict, dataclass

CAUSES = 'causes'
PRECEDES = 'precedes'
CONCURRENT = 'concurrent'
RELATED = 'related'

RELATIONSHIP_TYPES = (CAUSES, PRECEDES, CONCURRENT, RELATED)
DEFAULT_RELATIONSHIP_TYPE = RELATED


@dataclass(frozen=True)
class EdgeStyle:
    stroke: str
    stroke_width: float
    dash: str

    def as_dict(self):
        return {
            'stroke': self.stroke,
            'strokeWidth': self.stroke_width,
            'strokeDasharray': self.dash,
        }


EDGE_STYLES = {
    CAUSES: EdgeStyle(stroke='hsl(var(--primary))', stroke_width=2, dash='0'),
    PRECEDES: EdgeStyle(stroke='hsl(var(--foreground))', stroke_width=1.5, dash='0'),
    CONCURRENT: EdgeStyle(stroke='hsl(var(--secondary))', stroke_width=1.5, dash='5,5'),
    RELATED: EdgeStyle(stroke='hsl(var(--muted-foreground))', stroke_width=1, dash='3,3'),
}
FALLBACK_EDGE_STYLE = EdgeStyle(stroke='hsl(var(--muted-foreground))', stroke_width=1, dash='0')


def edge_style(relationship_type):
    return EDGE_STYLES.get(relationship_type, FALLBACK_EDGE_STYLE)


def resolve_relationship_type(value):
    """
    Normalises a requested relationship type.
    Blank means the connect-action default ('related'); anything else must be
    one of RELATIONSHIP_TYPES.
    """
    if value is None or not str(value).strip():
        return DEFAULT_RELATIONSHIP_TYPE
    value = str(value).strip().lower()
    if value not in RELATIONSHIP_TYPES:
        raise ValueError(f'Unknown relationship type: {value}')
    return value


def build_edge(relationship):
    """Render payload for one serialized relationship (see serializers)."""
    relationship_type = relationship.get('relationshipType') or ''
    return {
        'id': relationship.get('id'),
        'source': relationship.get('fromEventId'),
        'target': relationship.get('toEventId'),
        'type': 'timelineRelationship',
        'label': relationship_type,
        'style': edge_style(relationship_type).as_dict(),
        'arrows': 'to',
    }


def style_table():
    return {name: asdict(style) for name, style in EDGE_STYLES.items()}
