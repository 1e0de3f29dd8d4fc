"""
paperkit - printable paper model kits

Turns real-world measurements ("20 ft", "3 m 46 cm") into scaled drawings,
packs the resulting parts onto as few pages as possible, and renders them
to PDF or SVG.

Usage:
    from paperkit import Component, Kit, point, world

    class Panel(Component):
        def build(self):
            w, h = world(self.option("width")), world(self.option("height"))
            self.geometry.outline = [point(0, 0), point(0, h), point(w, h), point(w, 0)]
            self.set_extent(w, h)

        def render(self, pen):
            pen.polygon(self.geometry.outline, "stroke")

    class Panels(Kit):
        def default_options(self):
            return {"width": "10 ft", "height": "8 ft"}

        def build(self):
            for _ in range(4):
                self.add_piece(Panel(self.options.extra))

    Panels().generate({"scale": "O"}, output_path="panels.pdf")
"""

from .component import ChildPlacement, Component, Part
from .context import RenderContext
from .errors import LayoutError, PaperkitError, ParseError, ShapeError
from .kit import Kit, KitState
from .measurement import Frame, Measurement, parse, printed, unit_factor, world
from .options import KitOptions, merge_options
from .packer import (
    PackRecord,
    PackResult,
    PagePacker,
    Placement,
    area_descending,
    rectpack_placement,
)
from .page import Page
from .pair import MeasurementPair, PairKind, distance_between, point, size, vector
from .pen import DrawingPen
from .piece import Piece
from .scales import ModelScale, available_scales, lookup_scale
from .transform import (
    ROT90,
    ROT180,
    ROT270,
    AffineTransformation,
    identity,
    reflect_around_x_axis,
    resize,
    rotate,
    translate,
)

__version__ = "0.1.0"

__all__ = [
    # Measurements
    'Frame',
    'Measurement',
    'parse',
    'world',
    'printed',
    'unit_factor',
    'MeasurementPair',
    'PairKind',
    'point',
    'vector',
    'size',
    'distance_between',
    'ModelScale',
    'lookup_scale',
    'available_scales',
    # Transformations
    'AffineTransformation',
    'identity',
    'resize',
    'translate',
    'rotate',
    'reflect_around_x_axis',
    'ROT90',
    'ROT180',
    'ROT270',
    # Components and pipeline
    'Part',
    'Component',
    'ChildPlacement',
    'Kit',
    'KitState',
    'KitOptions',
    'merge_options',
    'RenderContext',
    'DrawingPen',
    'Piece',
    'Page',
    # Packing
    'PagePacker',
    'PackRecord',
    'PackResult',
    'Placement',
    'area_descending',
    'rectpack_placement',
    # Errors
    'PaperkitError',
    'ParseError',
    'ShapeError',
    'LayoutError',
]
