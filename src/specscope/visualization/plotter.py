"""Spectrum visualization.

Renders frequency (Hz) vs amplitude (dB) line charts to image files.
"""

import logging
from pathlib import Path
from typing import Optional

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from specscope.schemas import InternalConfig
from specscope.spectral import Spectrum

__all__ = ['SpectrumPlotter']

logger = logging.getLogger(__name__)


class SpectrumPlotter:
    """Generates magnitude-spectrum plots.

    Consumes the shifted labels and shifted magnitude values of a Spectrum
    (equal length, one series per plot) and redraws from scratch on every
    call; there is no incremental update.

    **Configuration:**

    All appearance settings (DPI, figure size, line style, format) come from
    ``config.visualization``.

    Example usage::

        plotter = SpectrumPlotter(config)
        path = plotter.plot(spectrum, output_dirs["plots"] / "scope_pair0.png")
    """

    def __init__(self, config: InternalConfig):
        viz_config = config.visualization

        self.dpi = viz_config.dpi
        self.figsize = tuple(viz_config.figsize)
        self.output_format = viz_config.output_format
        self.line_color = viz_config.line_color
        self.linewidth = viz_config.linewidth
        self.title = viz_config.title

        logger.info(f"SpectrumPlotter initialized (format={self.output_format}, dpi={self.dpi})")

    def default_filename(self, stem: str) -> str:
        return f"{stem}_spectrum.{self.output_format}"

    def plot(self, spectrum: Spectrum, output_path, title: Optional[str] = None) -> Path:
        """Render `spectrum` and save it.

        Parameters
        ----------
        spectrum : Spectrum
            Labels and magnitudes to draw.
        output_path : str or Path
            File path; a directory gets default_filename() appended.
        title : str, optional
            Overrides the configured title.

        Returns
        -------
        Path
            The written file.
        """
        output_path = Path(output_path)
        if output_path.is_dir():
            output_path = output_path / self.default_filename(f"pair{spectrum.pair_index}")
        output_path.parent.mkdir(parents=True, exist_ok=True)

        fig, ax = plt.subplots(figsize=self.figsize)
        try:
            ax.plot(
                spectrum.frequencies,
                spectrum.magnitude_db,
                color=self.line_color,
                linewidth=self.linewidth,
                label=spectrum.channel_name,
            )
            ax.set_xlabel("Frequency (Hz)")
            ax.set_ylabel("Amplitude (dB)")
            ax.set_title(
                title or self.title
                or f"Spectrum of {spectrum.channel_name} ({spectrum.sample_rate:g} Hz sampling)"
            )
            ax.grid(True, alpha=0.3)
            ax.legend(loc="upper right")

            fig.savefig(output_path, dpi=self.dpi, format=self.output_format, bbox_inches="tight")
        finally:
            plt.close(fig)

        logger.info("Plot saved: %s", output_path)
        return output_path
