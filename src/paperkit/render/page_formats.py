"""
Named page formats.

Sizes come from reportlab's page size table (in points) and are exposed in
millimeters for backends that work in mm.
"""

from reportlab.lib import pagesizes
from reportlab.lib.units import mm

PAGE_FORMATS_PT: dict[str, tuple[float, float]] = {
    "letter": pagesizes.LETTER,
    "legal": pagesizes.LEGAL,
    "tabloid": pagesizes.TABLOID,
    "ledger": pagesizes.portrait(pagesizes.LEDGER),
    "a0": pagesizes.A0,
    "a1": pagesizes.A1,
    "a2": pagesizes.A2,
    "a3": pagesizes.A3,
    "a4": pagesizes.A4,
    "a5": pagesizes.A5,
    "a6": pagesizes.A6,
    "b4": pagesizes.B4,
    "b5": pagesizes.B5,
}


def page_size_pt(page_format: str, orientation: str = "portrait") -> tuple[float, float]:
    """
    Look up a page format in points.

    Raises:
        ValueError: for unknown formats or orientations
    """
    try:
        size = PAGE_FORMATS_PT[page_format.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown page format {page_format!r}; use one of {sorted(PAGE_FORMATS_PT)}"
        ) from None
    if orientation == "portrait":
        return pagesizes.portrait(size)
    if orientation == "landscape":
        return pagesizes.landscape(size)
    raise ValueError(f"Orientation must be 'portrait' or 'landscape', not {orientation!r}")


def page_size_mm(page_format: str, orientation: str = "portrait") -> tuple[float, float]:
    width, height = page_size_pt(page_format, orientation)
    return (width / mm, height / mm)
