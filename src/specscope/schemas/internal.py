"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and contains NO optional fields that processing code depends on.

All .get() calls, fallback defaults, and validation logic are FORBIDDEN in
runtime code - everything is explicit here.
"""

from typing import Literal, Optional
from pydantic import Field, ConfigDict
from specscope.schemas.base import SpecscopeBaseModel


_FROZEN = ConfigDict(
    extra='forbid',
    validate_assignment=True,
    use_enum_values=True,
    str_strip_whitespace=True,
    frozen=True,
)


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalSpectrumConfig(SpecscopeBaseModel):
    """Runtime spectrum configuration."""
    sample_rate: float = Field(gt=0, allow_inf_nan=False)
    pair_index: int = Field(ge=0)
    db_floor: float = Field(gt=0)
    centered: bool

    model_config = _FROZEN


class InternalVisualizationConfig(SpecscopeBaseModel):
    """Runtime visualization settings."""
    enabled: bool
    dpi: int
    figsize: tuple[float, float]
    output_format: Literal["png", "pdf", "svg"]
    line_color: str
    linewidth: float
    title: Optional[str]

    model_config = _FROZEN


class InternalOutputConfig(SpecscopeBaseModel):
    """Runtime output configuration.

    Note: base_dir may be None when specscope is used as a library; the CLI
    runner requires it and falls back to the data file's directory.
    """
    base_dir: Optional[str]
    write_csv: bool

    model_config = _FROZEN


class InternalLoggingConfig(SpecscopeBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = _FROZEN


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(SpecscopeBaseModel):
    """Authoritative runtime configuration.

    This is the ONLY configuration schema that processing code sees.
    It is fully validated, immutable, and contains explicit values for
    all parameters.

    Usage
    -----
    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.sample_rate = config.spectrum.sample_rate  # NOT .get()
            self.dpi = config.visualization.dpi

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation

    All of that happens during config resolution, not in runtime code.
    """

    spectrum: InternalSpectrumConfig
    visualization: InternalVisualizationConfig
    output: InternalOutputConfig
    logging: InternalLoggingConfig

    model_config = _FROZEN
