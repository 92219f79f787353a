"""
Type tag catalog.

Plain data: which type tags are leaf marks and which are containers. The
node classes that realise them live in mark.py and composition.py.
"""

MARK_TYPES: tuple[str, ...] = (
    "interval",
    "line",
    "point",
    "text",
    "grid",
    "area",
    "node",
    "edge",
    "link",
    "image",
    "polygon",
    "box",
    "vector",
    "lineX",
    "lineY",
    "connector",
    "range",
    "rangeX",
    "rangeY",
)

COMPOSITION_TYPES: tuple[str, ...] = (
    "view",
    "spaceLayer",
    "spaceFlex",
    "facetRect",
    "repeatMatrix",
)
