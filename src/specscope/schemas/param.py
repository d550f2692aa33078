"""ParamConfig: Expert defaults for the specscope pipeline.

This module defines the complete default configuration. ALL tunable
parameters must have defaults here. No runtime code should define fallback
values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from specscope.schemas.base import SpecscopeBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class SpectrumConfig(SpecscopeBaseModel):
    """Spectrum computation settings."""
    sample_rate: float = Field(1.0, gt=0, allow_inf_nan=False, description="Sampling frequency in Hz")
    pair_index: int = Field(0, ge=0, description="Channel (pair column) to analyze")
    db_floor: float = Field(1e-12, gt=0, description="Added to |X| before 20*log10")
    centered: bool = True

    @field_validator("sample_rate", mode="before")
    @classmethod
    def coerce_sample_rate_to_float(cls, v):
        """Allow int or float for sample_rate."""
        return float(v)


class VisualizationConfig(SpecscopeBaseModel):
    """Visualization settings."""
    enabled: bool = True
    dpi: int = Field(150, ge=50)
    figsize: tuple[float, float] = (12.0, 6.0)
    output_format: Literal["png", "pdf", "svg"] = "png"
    line_color: str = "blue"
    linewidth: float = Field(1.0, gt=0)
    title: Optional[str] = None


class OutputConfig(SpecscopeBaseModel):
    """Output file configuration."""
    base_dir: Optional[str] = None
    write_csv: bool = True


class LoggingConfig(SpecscopeBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(SpecscopeBaseModel):
    """Complete expert configuration with all defaults.

    This is the single source of truth for all pipeline parameters.
    Every tunable parameter MUST have a default here.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)

    Runtime code only sees InternalConfig.
    """

    spectrum: SpectrumConfig = Field(default_factory=SpectrumConfig)
    visualization: VisualizationConfig = Field(default_factory=VisualizationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
