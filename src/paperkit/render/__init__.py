"""
Rendering backends.

Usage:
    from paperkit.render import create_backend

    backend = create_backend("svg")
"""

from .backend import RenderingBackend
from .page_formats import PAGE_FORMATS_PT, page_size_mm, page_size_pt
from .pdf_backend import PdfBackend
from .svg_backend import SvgBackend

BACKENDS = {
    "pdf": PdfBackend,
    "svg": SvgBackend,
}


def create_backend(name: str) -> RenderingBackend:
    """Instantiate a backend by name ("pdf" or "svg")."""
    try:
        return BACKENDS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown backend {name!r}; use one of {sorted(BACKENDS)}") from None


__all__ = [
    'RenderingBackend',
    'PdfBackend',
    'SvgBackend',
    'BACKENDS',
    'create_backend',
    'PAGE_FORMATS_PT',
    'page_size_pt',
    'page_size_mm',
]
