"""Recording backend and simple rectangular components shared by the tests."""

from __future__ import annotations

from pathlib import Path

from paperkit import Component, Kit, point, world


class RecordingBackend:
    """Backend that remembers every call instead of drawing."""

    unit = "mm"
    extension = ".rec"

    def __init__(self, size=(200.0, 100.0), y_axis_down=True):
        self.size = size
        self.y_axis_down = y_axis_down
        self.calls = []
        self.metadata = {}
        self.saved_to = None

    def page_size(self, page_format, orientation):
        self.calls.append(("page_size", page_format, orientation))
        return self.size

    def set_metadata(self, title, subject, creator):
        self.metadata = {"title": title, "subject": subject, "creator": creator}

    def set_style(self, fill_color=None, draw_color=None, line_width=None):
        self.calls.append(("set_style", fill_color, draw_color, line_width))

    def polyline(self, points, closed, fill, stroke):
        self.calls.append(("polyline", list(points), closed, fill, stroke))

    def new_page(self):
        self.calls.append(("new_page",))

    def save(self, path):
        self.saved_to = Path(path)
        return [self.saved_to]

    @property
    def polylines(self):
        return [call[1] for call in self.calls if call[0] == "polyline"]


class Box(Component):
    """Rectangle sized by the "width" and "height" options."""

    def build(self):
        g = self.geometry
        g.width = world(self.option("width"))
        g.height = world(self.option("height"))
        g.outline = [
            point(0, 0), point(0, g.height),
            point(g.width, g.height), point(g.width, 0),
        ]
        self.set_extent(g.width, g.height)

    def render(self, pen):
        pen.polygon(self.geometry.outline, "stroke")


class BoxKit(Kit):
    """Kit whose pieces are given as (width, height) strings."""

    def __init__(self, sizes=(), **kwargs):
        self.sizes = list(sizes)
        super().__init__(**kwargs)

    def default_options(self):
        return {"scale": "1:1000"}

    def build(self):
        for width, height in self.sizes:
            self.add_piece(Box(self.options.extra, width=width, height=height))
