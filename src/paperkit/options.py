"""
Kit and component options.

Options are plain immutable mappings. Defaults live in one place
(``CORE_DEFAULTS`` plus a kit's ``default_options()``) and are overridden by
explicit caller-supplied mappings, e.g. from the command line or a YAML
file::

    page_format: letter
    scale: N
    extra:
      houseWidth: 24 ft
      wallColor: peachpuff
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

CORE_DEFAULTS: Mapping[str, Any] = MappingProxyType({
    "page_format": "letter",
    "orientation": "portrait",
    "scale": "HO",
    "backend": "pdf",
    "output_path": None,
})


def merge_options(base: Mapping[str, Any] | None, overrides: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    """Return a read-only mapping of ``base`` updated with ``overrides``."""
    merged = dict(base or {})
    merged.update(overrides or {})
    return MappingProxyType(merged)


@dataclass(frozen=True)
class KitOptions:
    """
    Effective options for one Kit run.

    Attributes:
        page_format: Page format name known to the backend ("letter", "a4", ...)
        orientation: "portrait" or "landscape"
        scale: Model scale name or "N:D" ratio
        backend: "pdf" or "svg"
        output_path: Output file; defaults to "<KitClass>.<ext>"
        extra: Kit-specific options handed to the components
    """

    page_format: str = CORE_DEFAULTS["page_format"]
    orientation: str = CORE_DEFAULTS["orientation"]
    scale: str = CORE_DEFAULTS["scale"]
    backend: str = CORE_DEFAULTS["backend"]
    output_path: Path | None = None
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        if self.orientation not in ("portrait", "landscape"):
            raise ValueError(f"Orientation must be 'portrait' or 'landscape', not {self.orientation!r}")
        if self.output_path is not None and not isinstance(self.output_path, Path):
            object.__setattr__(self, "output_path", Path(self.output_path))
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> KitOptions:
        """Split a flat or nested mapping into core fields and ``extra``."""
        return cls().merged(data)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> KitOptions:
        """Load options from a YAML file."""
        return cls.from_mapping(load_options_file(yaml_path))

    def merged(self, overrides: Mapping[str, Any] | None) -> KitOptions:
        """
        Return new options with ``overrides`` applied.

        Keys naming a core field replace it; an ``extra`` mapping and any
        other keys are merged into ``extra``.
        """
        core_names = {f.name for f in dataclasses.fields(self)} - {"extra"}
        core = {}
        extra = dict(self.extra)
        for key, value in (overrides or {}).items():
            if key in core_names:
                core[key] = value
            elif key == "extra":
                extra.update(value or {})
            else:
                extra[key] = value
        return dataclasses.replace(self, extra=MappingProxyType(extra), **core)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a core field or kit-specific option by name."""
        if key != "extra" and key in {f.name for f in dataclasses.fields(self)}:
            return getattr(self, key)
        return self.extra.get(key, default)

    def __getitem__(self, key: str) -> Any:
        if key != "extra" and key in {f.name for f in dataclasses.fields(self)}:
            return getattr(self, key)
        return self.extra[key]

    def as_dict(self) -> dict[str, Any]:
        """Plain dict, e.g. for recording in document metadata."""
        data = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        data["output_path"] = str(self.output_path) if self.output_path else None
        data["extra"] = dict(self.extra)
        return data


def load_options_file(yaml_path: str | Path) -> dict[str, Any]:
    """Read a YAML options file into a plain dict of overrides."""
    with open(yaml_path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{yaml_path}: expected a mapping of options at the top level")
    return dict(data)
