import math
from dataclasses import dataclass, fields, replace

# --- Global Settings ---
DEFAULT_ROWS = 8
DEFAULT_COLS = 8
CANVAS_WIDTH, CANVAS_HEIGHT = 1280, 800
FPS = 60
SAMPLE_STEP = 0.1
SLIDER_STEP = 0.01

# Allowed domain for each range, as (min, max). Keys match EdgeConfig fields.
SLIDER_BOUNDS = {
    "base_pos_range": (0.1, 0.9),
    "base_size_range": (0.0, 0.5),
    "tip_size_range": (0.0, 0.5),
    "tip_height_range": (0.1, 0.4),
}

# camelCase names accepted from JSON config files.
_ALIASES = {
    "basePosRange": "base_pos_range",
    "baseSizeRange": "base_size_range",
    "tipSizeRange": "tip_size_range",
    "tipHeightRange": "tip_height_range",
}


@dataclass(frozen=True)
class EdgeConfig:
    """Randomization ranges for tabbed edges, as fractions of the edge length."""
    base_pos_range: tuple = (0.4, 0.6)
    base_size_range: tuple = (0.1, 0.2)
    tip_size_range: tuple = (0.1, 0.2)
    tip_height_range: tuple = (0.1, 0.2)

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            try:
                lo, hi = (float(v) for v in value)
            except (TypeError, ValueError):
                raise ValueError(f"{f.name} must be a [min, max] pair, got {value!r}") from None
            if not (math.isfinite(lo) and math.isfinite(hi)):
                raise ValueError(f"{f.name} must be finite, got {value!r}")
            if lo > hi:
                raise ValueError(f"{f.name}: min {lo} is greater than max {hi}")
            bound_lo, bound_hi = SLIDER_BOUNDS[f.name]
            if lo < bound_lo or hi > bound_hi:
                raise ValueError(f"{f.name}: {lo}..{hi} outside {bound_lo}..{bound_hi}")
            object.__setattr__(self, f.name, (lo, hi))

    @classmethod
    def from_mapping(cls, data):
        """Build a config from a dict using either snake_case or camelCase keys."""
        if not isinstance(data, dict):
            raise ValueError(f"edge config must be a mapping, got {type(data).__name__}")
        kwargs = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in SLIDER_BOUNDS:
                raise ValueError(f"unknown edge config field {key!r}")
            try:
                kwargs[name] = tuple(value)
            except TypeError:
                raise ValueError(f"{key} must be a [min, max] pair, got {value!r}") from None
        return cls(**kwargs)

    def with_range(self, name, lo, hi):
        """Return a copy with one range replaced, snapped to the slider step."""
        lo = round(round(lo / SLIDER_STEP) * SLIDER_STEP, 2)
        hi = round(round(hi / SLIDER_STEP) * SLIDER_STEP, 2)
        return replace(self, **{name: (lo, hi)})

    def to_dict(self):
        return {f.name: list(getattr(self, f.name)) for f in fields(self)}
