"""
Kits: everything printed on one set of pages.

A kit is a collection of pieces (top-level components) that are packed onto
as few pages as the placement routine manages and rendered into a single
document. Subclass ``Kit`` to describe a model::

    class SimpleHouse(Kit):
        def default_options(self):
            return {"houseWidth": "20 ft", "houseDepth": "35 ft"}

        def build(self):
            self.add_piece(FrontWall(self.options.extra))
            ...

    SimpleHouse().generate({"scale": "N", "wallColor": "peachpuff"})

``generate()`` runs three phases strictly in order:

1. build  - the subclass creates components and registers pieces
2. pack   - pieces are assigned a page and a position on it
3. render - the component trees are walked and drawn through a backend
"""

from __future__ import annotations

import enum
import json
import logging
import warnings
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .component import Part
from .context import RenderContext
from .options import KitOptions
from .packer import PagePacker, PlacementRoutine, rectpack_placement
from .page import Page
from .pen import DrawingPen
from .piece import Piece
from .render import RenderingBackend, create_backend
from .scales import lookup_scale
from .transform import AffineTransformation, translate

logger = logging.getLogger(__name__)

CREATOR = "paperkit"


class KitState(enum.Enum):
    NEW = "new"
    BUILT = "built"
    PACKED = "packed"
    RENDERED = "rendered"


class Kit:
    """
    Base class for kits.

    Subclasses override ``build()`` and usually ``default_options()``.
    Everything else is driven by ``generate()``.

    Args:
        placement: Placement routine used by the page packer
    """

    def __init__(self, placement: PlacementRoutine = rectpack_placement):
        self.placement = placement
        self.options = KitOptions().merged(self.default_options())
        self.pieces: list[Piece] = []
        self.pages: list[Page] = []
        self.context: RenderContext | None = None
        self.state = KitState.NEW

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # -------------------------------------------------------------------------
    # Subclass hooks
    # -------------------------------------------------------------------------

    def default_options(self) -> Mapping[str, Any]:
        """
        Kit-specific options and their defaults.

        Listing every option here lets front ends (such as ``paperkit
        options``) show what can be changed.
        """
        return {}

    def build(self) -> None:
        """Create the components and register top-level ones with add_piece()."""
        raise NotImplementedError(f"{type(self).__name__} must implement build()")

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------

    def option(self, key: str) -> Any:
        try:
            return self.options[key]
        except KeyError:
            raise KeyError(f"{type(self).__name__} needs option {key!r}, which was not provided") from None

    def add_piece(self, component: Part) -> Piece:
        """Register a top-level component; it is built now if necessary."""
        if self.state is not KitState.NEW:
            raise RuntimeError("Pieces can only be added during the build phase")
        if not isinstance(component, Part):
            raise TypeError(f"add_piece() needs a Part, found {component!r}")
        piece = Piece(component)
        self.pieces.append(piece)
        return piece

    def generate(
        self,
        overrides: Mapping[str, Any] | None = None,
        backend: RenderingBackend | None = None,
        output_path: str | Path | None = None,
    ) -> list[Path]:
        """
        Build, pack and render the kit into a document.

        Args:
            overrides: Options replacing the defaults for this run
            backend: Rendering backend; created from the "backend" option
                when omitted
            output_path: Output file; overrides the "output_path" option

        Returns:
            Paths of the written files
        """
        self.options = KitOptions().merged(self.default_options()).merged(overrides)
        if output_path is not None:
            self.options = self.options.merged({"output_path": output_path})
        if backend is None:
            backend = create_backend(self.options.backend)

        self.pieces = []
        self.pages = []
        self.state = KitState.NEW

        scale = lookup_scale(self.options.scale)
        page_size = backend.page_size(self.options.page_format, self.options.orientation)
        self.context = RenderContext.create(scale, page_size, backend.unit, backend.y_axis_down)
        logger.info(
            "Generating %s at %s on %s %s pages",
            type(self).__name__, scale, self.options.page_format, self.options.orientation,
        )

        self.run_build()
        self.pack()
        self.render(backend)

        path = self.options.output_path or Path(f"{type(self).__name__}{backend.extension}")
        return backend.save(path)

    def run_build(self) -> None:
        if self.state is not KitState.NEW:
            raise RuntimeError(f"Cannot build a kit in state {self.state.value!r}")
        self.build()
        if not self.pieces:
            warnings.warn(
                f"{type(self).__name__}.build() added no pieces; the document will be blank",
                stacklevel=2,
            )
        logger.debug("Built %d piece(s)", len(self.pieces))
        self.state = KitState.BUILT

    def pack(self) -> None:
        """Assign every piece a page and a position on it."""
        if self.state is not KitState.BUILT:
            raise RuntimeError("Kit has not been built yet. Call run_build() first.")
        packer = PagePacker(
            self.context.page_width.value,
            self.context.page_height.value,
            placement=self.placement,
        )
        self.pages = packer.paginate(self.pieces)
        logger.info("Packed %d piece(s) onto %d page(s)", len(self.pieces), len(self.pages))
        self.state = KitState.PACKED

    def render(self, backend: RenderingBackend) -> None:
        """Draw every page; the backend must already know the page size."""
        if self.state is not KitState.PACKED:
            raise RuntimeError("Kit has not been packed yet. Call pack() first.")

        backend.set_metadata(
            title=type(self).__name__,
            subject=self._origination_note(),
            creator=CREATOR,
        )
        master = self.context.master_transform
        for page in self.pages:
            if page.index > 0:
                backend.new_page()
            for piece in page:
                shift = translate(piece.origin.x, piece.origin.y)
                self._render_tree(piece.component, master.compose(shift), backend)
        self.state = KitState.RENDERED

    def _render_tree(self, component: Part, xform: AffineTransformation, backend: RenderingBackend) -> None:
        # Pre-order: the parent is drawn before (underneath) its children.
        component.render(DrawingPen(backend, xform, self.context))
        for child in component.children():
            self._render_tree(child.component, xform.compose(child.shift), backend)

    def _origination_note(self) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        return (
            f"File created at {timestamp} with class {type(self).__name__} "
            f"using these options: {json.dumps(self.options.as_dict(), default=str, sort_keys=True)}"
        )
