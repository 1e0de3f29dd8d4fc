"""
Drawable parts of a kit.

Each separate part (or sub-part) of a model is a subclass of ``Component``:

- ``build()`` computes the geometry once: named points and lengths in
  ``self.geometry``, the overall extent via ``set_extent()``, and any
  sub-components via ``add_child()``.
- ``render(pen)`` draws this component's own shapes. Sub-components are
  rendered automatically by the kit.

Every component is built and drawn in its own coordinate system: the
drawing lies in the first quadrant (positive x and y) with its lower-left
corner nestled against the origin. The kit takes care of mapping it onto
the page.

Example:
    class Door(Component):
        def build(self):
            g = self.geometry
            g.width = world(self.option("doorWidth"))
            g.height = world(self.option("doorHeight"))
            g.outline = [point(0, 0), point(0, g.height),
                         point(g.width, g.height), point(g.width, 0)]
            self.set_extent(g.width, g.height)

        def render(self, pen):
            pen.set_style(draw_color=self.option("trimColor"))
            pen.polygon(self.geometry.outline, "stroke")
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from dataclasses import dataclass
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .measurement import Frame, Measurement, MeasurementLike, parse
from .options import merge_options
from .pair import MeasurementPair, PairKind
from .transform import AffineTransformation, rotate, translate

if TYPE_CHECKING:
    from .pen import DrawingPen


@runtime_checkable
class Part(Protocol):
    """
    What the kit needs from anything it lays out and draws.

    ``ensure_built()`` must run ``build()`` at most once and return the part
    itself, so registering a part that is already built does not build it
    again.
    """

    def build(self) -> None: ...

    def ensure_built(self) -> Part: ...

    def get_extent(self) -> MeasurementPair: ...

    def render(self, pen: DrawingPen) -> None: ...

    def children(self) -> list[ChildPlacement]: ...


@dataclass(frozen=True)
class ChildPlacement:
    """A sub-component and its fixed position inside the parent."""

    component: Component
    shift: AffineTransformation


class Component(abc.ABC):
    """
    Base class for all drawable parts.

    Args:
        options: Options inherited from the parent or kit
        **overrides: Options replaced for this component (and, if passed
            on, its children)
    """

    def __init__(self, options: Mapping[str, Any] | None = None, **overrides: Any):
        self.options = merge_options(options, overrides)
        self.geometry = SimpleNamespace()
        self._extent: MeasurementPair | None = None
        self._children: list[ChildPlacement] = []
        self._built = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @abc.abstractmethod
    def build(self) -> None:
        """Compute geometry and extent; create and position sub-components."""

    @abc.abstractmethod
    def render(self, pen: DrawingPen) -> None:
        """Draw this component's own shapes (not its sub-components)."""

    # -------------------------------------------------------------------------
    # Build phase
    # -------------------------------------------------------------------------

    def ensure_built(self) -> Component:
        """Run ``build()`` exactly once."""
        if not self._built:
            self.build()
            if self._extent is None:
                raise RuntimeError(f"{self!r}.build() did not call set_extent()")
            self._built = True
        return self

    @property
    def is_built(self) -> bool:
        return self._built

    def option(self, key: str) -> Any:
        try:
            return self.options[key]
        except KeyError:
            raise KeyError(f"{type(self).__name__} needs option {key!r}, which was not provided") from None

    def set_extent(self, width: MeasurementLike, height: MeasurementLike) -> None:
        """Record the footprint of this component in world units."""
        self._extent = MeasurementPair(
            parse(width, Frame.WORLD), parse(height, Frame.WORLD), PairKind.SIZE, Frame.WORLD,
        )

    def add_child(
        self,
        child: Component,
        position: MeasurementPair | tuple,
        rotation: int | None = None,
    ) -> Component:
        """
        Attach a sub-component with its local origin at ``position``.

        Args:
            child: The sub-component; it is built now if it was not already
            position: Point in this component's local coordinates
            rotation: Optional 90/180/270 degree counter-clockwise rotation
                of the child about its own origin, applied before it is
                moved to ``position``

        Returns:
            The child, for chaining
        """
        if not isinstance(child, Component):
            raise TypeError(f"add_child() needs a Component, found {child!r}")
        if not isinstance(position, MeasurementPair):
            position = MeasurementPair(*position, PairKind.POINT, Frame.WORLD)
        if position.kind is not PairKind.POINT:
            raise TypeError(f"Child position must be a point, found a {position.kind.value}")

        child.ensure_built()
        shift = translate(position.x, position.y)
        if rotation is not None:
            shift = shift.compose(rotate(rotation))
        self._children.append(ChildPlacement(child, shift))
        return child

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_extent(self) -> MeasurementPair:
        if not self._built or self._extent is None:
            raise RuntimeError(f"{self!r} has not been built yet. Call ensure_built() first.")
        return self._extent

    @property
    def width(self) -> Measurement:
        return self.get_extent().width

    @property
    def height(self) -> Measurement:
        return self.get_extent().height

    def children(self) -> list[ChildPlacement]:
        return list(self._children)
