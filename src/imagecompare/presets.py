"""Comparison configuration, presets and color helpers."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .errors import InvalidConfigError

Color = Tuple[int, int, int]

RED: Color = (255, 0, 0)


@dataclass(frozen=True)
class CompareConfig:
    """Tolerances driving the fuzzy pixel comparison.

    ``pixel_threshold`` is the largest per-channel difference (channels are
    normalised to ``[0, 1]``) still considered equal. ``max_usage_per_pixel``
    caps how many source pixels may be matched against one target pixel.
    ``max_search_distance`` bounds the square rings searched around each
    pixel. ``percent_allowed_different`` is a fraction, not a percentage:
    ``0.00005`` means 0.005% of the compared pixels may fail.
    """

    pixel_threshold: float = 0.2
    max_usage_per_pixel: int = 1
    max_search_distance: int = 5
    max_box_width: int = 100
    max_box_height: int = 50
    percent_allowed_different: float = 0.00005
    outline_color: Color = RED

    def __post_init__(self) -> None:
        for name in ("pixel_threshold", "percent_allowed_different"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfigError(f"{name} must be a number, got {value!r}")
        if not 0.0 <= self.pixel_threshold <= 1.0:
            raise InvalidConfigError(
                f"pixel_threshold must be within [0, 1], got {self.pixel_threshold!r}"
            )
        for name in ("max_usage_per_pixel", "max_search_distance", "max_box_width", "max_box_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidConfigError(f"{name} must be a positive integer, got {value!r}")
        if self.percent_allowed_different < 0:
            raise InvalidConfigError(
                f"percent_allowed_different must not be negative, got {self.percent_allowed_different!r}"
            )
        try:
            color = tuple(self.outline_color)
        except TypeError as exc:
            raise InvalidConfigError(
                f"outline_color must be an RGB triple, got {self.outline_color!r}"
            ) from exc
        if len(color) != 3 or any(
            isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255 for c in color
        ):
            raise InvalidConfigError(
                f"outline_color must be three integers in [0, 255], got {self.outline_color!r}"
            )
        # Lists coming from JSON are stored as tuples so the config stays hashable.
        object.__setattr__(self, "outline_color", color)

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["outline_color"] = list(self.outline_color)
        return data

    def copy(self, **overrides: object) -> "CompareConfig":
        return replace(self, **overrides)


@dataclass(frozen=True)
class Preset:
    """Named configuration bundle."""

    name: str
    description: str
    config: CompareConfig

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "config": self.config.to_dict(),
        }


PRESETS: Mapping[str, Preset] = {
    "default": Preset(
        name="default",
        description="Tolerates anti-aliasing and shifts of a few pixels.",
        config=CompareConfig(),
    ),
    "strict": Preset(
        name="strict",
        description="Small colour tolerance and short search distance.",
        config=CompareConfig(
            pixel_threshold=0.1,
            max_search_distance=3,
            percent_allowed_different=0.0,
        ),
    ),
    "loose": Preset(
        name="loose",
        description="Wide colour tolerance; target pixels may be reused twice.",
        config=CompareConfig(
            pixel_threshold=0.3,
            max_usage_per_pixel=2,
            max_search_distance=7,
            percent_allowed_different=0.001,
        ),
    ),
}


def get_preset(name: str) -> Preset:
    key = name.lower()
    if key not in PRESETS:
        raise KeyError(f"Unknown preset '{name}'. Available: {', '.join(sorted(PRESETS))}")
    return PRESETS[key]


def iter_presets() -> Iterable[Preset]:
    return PRESETS.values()


def parse_color(value: Optional[str]) -> Optional[Color]:
    """Parse ``#RRGGBB``, ``#RRGGBBAA`` or ``r,g,b`` into an RGB triple."""

    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if value.startswith("#"):
        hex_value = value[1:]
        if len(hex_value) not in (6, 8):
            raise ValueError("Hex colors must be #RRGGBB or #RRGGBBAA")
        try:
            return tuple(int(hex_value[i : i + 2], 16) for i in range(0, 6, 2))  # type: ignore[return-value]
        except ValueError as exc:
            raise ValueError(f"Invalid hex color '{value}'") from exc
    parts = value.replace(";", ",").split(",")
    if len(parts) != 3:
        raise ValueError("RGB colors must provide three comma separated numbers")
    try:
        rgb = tuple(int(p.strip()) for p in parts)
    except ValueError as exc:
        raise ValueError(f"Invalid RGB color '{value}'") from exc
    if any(not 0 <= channel <= 255 for channel in rgb):
        raise ValueError("RGB channels must be within 0-255")
    return rgb  # type: ignore[return-value]


def load_config_file(path: str | Path, base: Optional[CompareConfig] = None) -> CompareConfig:
    """Apply the JSON object stored at ``path`` on top of ``base``.

    Keys must be :class:`CompareConfig` field names. Unknown keys and values
    failing validation raise :class:`InvalidConfigError`.
    """

    base = base or CompareConfig()
    with Path(path).open("r", encoding="utf-8") as handle:
        loaded = json.load(handle)
    if not isinstance(loaded, dict):
        raise InvalidConfigError(f"{path}: expected a JSON object")

    known = {field.name for field in fields(CompareConfig)}
    unknown = sorted(set(loaded) - known)
    if unknown:
        raise InvalidConfigError(f"{path}: unknown option(s) {', '.join(unknown)}")

    overrides = dict(loaded)
    if isinstance(overrides.get("outline_color"), str):
        try:
            overrides["outline_color"] = parse_color(overrides["outline_color"])
        except ValueError as exc:
            raise InvalidConfigError(f"{path}: {exc}") from exc
    return base.copy(**overrides)
