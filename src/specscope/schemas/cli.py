"""CLIConfig: Command-line operational overrides.

Minimal configuration for parameters that commonly change between runs:
sample rate, channel, output path, verbosity.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional
from pydantic import Field
from specscope.schemas.base import SpecscopeBaseModel


class CLIConfig(SpecscopeBaseModel):
    """Command-line configuration overrides.

    Operational-only settings that override user and param configs.
    Highest priority in config resolution.

    Usage
    -----
        cli_cfg = CLIConfig(
            sample_rate=1000.0,
            pair_index=1,
            base_dir="/scratch/spectra",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    sample_rate: Optional[float] = Field(None, gt=0)
    pair_index: Optional[int] = Field(None, ge=0)
    base_dir: Optional[str] = None
    no_plot: Optional[bool] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        spectrum_overrides = {}
        if self.sample_rate is not None:
            spectrum_overrides["sample_rate"] = self.sample_rate
        if self.pair_index is not None:
            spectrum_overrides["pair_index"] = self.pair_index

        if spectrum_overrides:
            overrides["spectrum"] = spectrum_overrides

        if self.base_dir is not None:
            overrides["output"] = {"base_dir": str(self.base_dir)}

        if self.no_plot:
            overrides["visualization"] = {"enabled": False}

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
