"""Configuration schema and reference-white constants.

Provides pydantic models for:
    - ReferenceWhite: immutable (X, Y, Z) white point, Y scaled to 100
    - ColourConfigV1: colour.v1.yaml, selecting the process-wide white
      and the lightness bounds used by adjust_lightness

The reference white is the main configurable quantity in the pipeline. It is
passed explicitly to xyz2lab/lab2xyz; forward and inverse transforms must
receive the same instance or LAB round-trips drift.

Presets:
    D65_2   (95.047, 100.0, 108.883)  D65 illuminant, CIE 1931 2° observer (default)
    D65_10  (94.811, 100.0, 107.304)  D65 illuminant, CIE 1964 10° observer

Usage:
    from colour_delta.utils import validators

    cfg = validators.load_colour_config("configs/colour.v1.yaml")
    white = validators.resolve_reference_white(cfg)
"""

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .logging_config import get_logger

logger = get_logger(__name__)


class ReferenceWhite(BaseModel):
    """Tristimulus values of the reference white (Y=100 scale)."""
    model_config = ConfigDict(frozen=True)

    x: float = Field(..., gt=0, description="Xr")
    y: float = Field(..., gt=0, description="Yr")
    z: float = Field(..., gt=0, description="Zr")
    name: Optional[str] = Field(None, description="Preset name, if any")

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


D65_2 = ReferenceWhite(x=95.047, y=100.0, z=108.883, name="D65_2")
D65_10 = ReferenceWhite(x=94.811, y=100.0, z=107.304, name="D65_10")

REFERENCE_WHITES: Dict[str, ReferenceWhite] = {
    "D65_2": D65_2,
    "D65_10": D65_10,
}

DEFAULT_WHITE = D65_2

# CIELAB lightness bounds applied after a lightness adjustment
LIGHTNESS_RANGE: Tuple[float, float] = (0.0, 100.0)


def get_reference_white(name: str) -> ReferenceWhite:
    """Look up a preset reference white by name (case-insensitive).

    Raises
    ------
    ValueError
        If name is not a known preset
    """
    key = str(name).upper()
    if key not in REFERENCE_WHITES:
        raise ValueError(
            f"Unknown reference white: {name}. Use one of {sorted(REFERENCE_WHITES)}."
        )
    return REFERENCE_WHITES[key]


def ensure_reference_white(white: ReferenceWhite) -> ReferenceWhite:
    """Reject anything that is not a ReferenceWhite instance."""
    if not isinstance(white, ReferenceWhite):
        raise TypeError(
            f"white must be a ReferenceWhite, got {type(white).__name__}"
        )
    return white


# ============================================================================
# COLOUR CONFIG V1
# ============================================================================

class ColourConfigV1(BaseModel):
    """colour.v1.yaml schema."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_version: str = Field("colour.v1", alias="schema", description="Schema version")
    reference_white: ReferenceWhite = Field(
        DEFAULT_WHITE,
        description="Preset name (D65_2, D65_10) or explicit {x, y, z}"
    )
    lightness_clamp: Tuple[float, float] = Field(
        LIGHTNESS_RANGE,
        description="[lo, hi] bounds for L* after adjust_lightness, within [0, 100]"
    )

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "colour.v1":
            raise ValueError(f"Expected schema 'colour.v1', got '{v}'")
        return v

    @field_validator('reference_white', mode='before')
    @classmethod
    def resolve_preset(cls, v):
        if isinstance(v, str):
            return get_reference_white(v)
        return v

    @field_validator('lightness_clamp')
    @classmethod
    def validate_lightness_clamp(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        lo, hi = v
        if not (0.0 <= lo < hi <= 100.0):
            raise ValueError(f"lightness_clamp must satisfy 0 <= lo < hi <= 100, got [{lo}, {hi}]")
        return v


def resolve_reference_white(cfg: Optional[ColourConfigV1] = None) -> ReferenceWhite:
    """Reference white selected by a loaded config, or DEFAULT_WHITE without one."""
    if cfg is None:
        return DEFAULT_WHITE
    return cfg.reference_white


def load_colour_config(path: Union[str, Path]) -> ColourConfigV1:
    """Load and validate colour config from YAML.

    Parameters
    ----------
    path : Union[str, Path]
        Path to colour.v1.yaml file

    Returns
    -------
    ColourConfigV1
        Validated configuration

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If validation fails (with actionable error message)
    """
    from . import fs

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Colour config not found: {path}")

    data = fs.load_yaml(path)
    try:
        cfg = ColourConfigV1(**data)
    except Exception as e:
        raise ValueError(f"Colour config validation failed at {path}: {e}") from e

    white = resolve_reference_white(cfg)
    lo, hi = cfg.lightness_clamp
    logger.info(
        f"Loaded colour config {path}: reference white "
        f"{white.name or 'custom'} ({white.x}, {white.y}, {white.z}), lightness clamp [{lo}, {hi}]"
    )
    return cfg
