"""
Per-run render context.

Everything that depends on the chosen scale and page format is computed
once per ``Kit.generate()`` call and passed down explicitly, so several kits
can run in the same process without sharing state.
"""

from __future__ import annotations

from dataclasses import dataclass

from .measurement import Frame, Measurement, parse
from .scales import ModelScale
from .transform import AffineTransformation, reflect_around_x_axis, resize, translate


@dataclass(frozen=True)
class RenderContext:
    """
    Attributes:
        scale: Active model scale
        unit: Native length unit of the rendering backend
        printed_width: Page width on paper
        printed_height: Page height on paper
        page_width: Page width expressed as a real-world length
        page_height: Page height expressed as a real-world length
        master_transform: World coordinates -> printed page coordinates
    """

    scale: ModelScale
    unit: str
    printed_width: Measurement
    printed_height: Measurement
    page_width: Measurement
    page_height: Measurement
    master_transform: AffineTransformation

    @classmethod
    def create(
        cls,
        scale: ModelScale,
        page_size: tuple[float, float],
        unit: str,
        y_axis_down: bool,
    ) -> RenderContext:
        """
        Build the context for a backend page of ``page_size`` (in ``unit``).

        The master transform shrinks world lengths by the scale ratio. For
        backends whose Y axis points down the page it first reflects Y and
        slides the result from the fourth quadrant back into the first.
        """
        printed_width = parse([page_size[0], unit], Frame.PRINTED)
        printed_height = parse([page_size[1], unit], Frame.PRINTED)
        page_width = Measurement(printed_width.value * scale.ratio, Frame.WORLD)
        page_height = Measurement(printed_height.value * scale.ratio, Frame.WORLD)

        shrink = resize(1 / scale.ratio)
        if y_axis_down:
            master = shrink.compose(translate(0, page_height)).compose(reflect_around_x_axis())
        else:
            master = shrink

        return cls(
            scale=scale,
            unit=unit,
            printed_width=printed_width,
            printed_height=printed_height,
            page_width=page_width,
            page_height=page_height,
            master_transform=master,
        )

    def to_world(self, length: Measurement) -> Measurement:
        """Real-world length that prints as ``length`` at this scale."""
        return Measurement(parse(length, Frame.PRINTED).value * self.scale.ratio, Frame.WORLD)

    def to_printed(self, length: Measurement) -> Measurement:
        """Printed length of a real-world ``length`` at this scale."""
        return Measurement(parse(length, Frame.WORLD).value / self.scale.ratio, Frame.PRINTED)
