"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs in a variety of formats, with aliases
for common naming patterns (e.g., SAMPLE_RATE → sample_rate).

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults. Validation is lenient to accept
both uppercase and lowercase keys, integers where floats are expected, etc.
"""

from typing import Optional
from pydantic import Field, field_validator
from specscope.schemas.base import SpecscopeBaseModel


class UserSpectrumConfig(SpecscopeBaseModel):
    """User-facing spectrum config."""
    sample_rate: Optional[float] = None
    pair_index: Optional[int] = None
    db_floor: Optional[float] = None
    centered: Optional[bool] = None

    @field_validator("sample_rate", "db_floor", mode="before")
    @classmethod
    def coerce_numeric(cls, v):
        """Accept int, float or numeric string."""
        if v is not None:
            return float(v)
        return v


class UserVisualizationConfig(SpecscopeBaseModel):
    """User-facing visualization config."""
    enabled: Optional[bool] = None
    dpi: Optional[int] = None
    figsize: Optional[tuple[float, float]] = None
    output_format: Optional[str] = None
    line_color: Optional[str] = None
    linewidth: Optional[float] = None
    title: Optional[str] = None

    @field_validator("output_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Normalize format names to lowercase without a leading dot."""
        if isinstance(v, str):
            return v.lower().strip().lstrip(".")
        return v


class UserConfig(SpecscopeBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Users only specify
    what they want to override from ParamConfig defaults.

    This config is converted to internal overrides during resolution.

    Usage
    -----
        user_cfg = UserConfig(
            sample_rate=48000,
            pair_index=1,
            base_dir="/data/spectra",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Spectrum settings (flat aliases)
    sample_rate: Optional[float] = Field(None, alias="SAMPLE_RATE")
    pair_index: Optional[int] = Field(None, alias="PAIR_INDEX")
    db_floor: Optional[float] = Field(None, alias="DB_FLOOR")

    # Output settings (flat aliases)
    base_dir: Optional[str] = Field(None, alias="BASE_DIR")
    write_csv: Optional[bool] = Field(None, alias="WRITE_CSV")
    plot: Optional[bool] = Field(None, alias="PLOT")

    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")

    # Nested overrides (advanced users)
    spectrum: Optional[UserSpectrumConfig] = None
    visualization: Optional[UserVisualizationConfig] = None

    model_config = SpecscopeBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("sample_rate", "db_floor", mode="before")
    @classmethod
    def coerce_numeric_fields(cls, v):
        """Accept int, float or numeric string for numeric fields."""
        if v is not None:
            return float(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept 'debug', 'Debug', ..."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        # Spectrum section
        spectrum = {}
        if self.sample_rate is not None:
            spectrum["sample_rate"] = self.sample_rate
        if self.pair_index is not None:
            spectrum["pair_index"] = self.pair_index
        if self.db_floor is not None:
            spectrum["db_floor"] = self.db_floor

        # Merge with explicit spectrum config
        if self.spectrum is not None:
            spectrum.update(self.spectrum.model_dump(exclude_none=True))

        if spectrum:
            overrides["spectrum"] = spectrum

        # Output section
        output = {}
        if self.base_dir is not None:
            output["base_dir"] = str(self.base_dir)
        if self.write_csv is not None:
            output["write_csv"] = self.write_csv

        if output:
            overrides["output"] = output

        # Visualization section
        visualization = {}
        if self.plot is not None:
            visualization["enabled"] = self.plot

        if self.visualization is not None:
            visualization.update(self.visualization.model_dump(exclude_none=True))

        if visualization:
            overrides["visualization"] = visualization

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
