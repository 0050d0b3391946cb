"""Example: build a small drawing with the chainable API."""

from qwsvg import Document


def row(doc):
    for i in range(4):
        doc.square(10 + i * 25, 10, 20, {"fill": "none", "stroke": "black"})


doc = Document(width=200, height=120, attributes={"id": "example"})
doc.head("<style>.dot { fill: tomato; }</style>")
doc.group(row, {"id": "squares"})
doc.group(
    lambda d: d.circle(40, 80, 15, {"class": "dot"}).triangle(100, 80, 30, {"fill": "gold"}),
    {"id": "shapes", "style": {"opacity": 0.8}},
)
doc.polyline([[140, 95], [160, 65], [180, 95]], {"fill": "none", "stroke": "navy"})

print(doc.markup())
