"""Tests for SpectrumPlotter."""

import pytest

pytestmark = pytest.mark.integration

from specscope.pipeline import parse_dataset
from specscope.spectral import compute_spectrum
from specscope.visualization import SpectrumPlotter


@pytest.fixture
def spectrum(tone_text):
    return compute_spectrum(parse_dataset(tone_text), sample_rate=8.0)


class TestSpectrumPlotter:

    def test_settings_come_from_config(self, make_config):
        config = make_config(visualization={"dpi": 72, "output_format": "svg", "line_color": "red"})
        plotter = SpectrumPlotter(config)
        assert plotter.dpi == 72
        assert plotter.output_format == "svg"
        assert plotter.line_color == "red"
        assert plotter.figsize == (12.0, 6.0)

    def test_default_filename(self, internal_config):
        assert SpectrumPlotter(internal_config).default_filename("scope_pair0") == "scope_pair0_spectrum.png"

    def test_plot_writes_file(self, internal_config, spectrum, temp_dir):
        out = SpectrumPlotter(internal_config).plot(spectrum, temp_dir / "plots" / "tone.png")
        assert out == temp_dir / "plots" / "tone.png"
        assert out.exists()
        assert out.stat().st_size > 0

    def test_plot_into_directory_uses_default_name(self, internal_config, spectrum, temp_dir):
        out = SpectrumPlotter(internal_config).plot(spectrum, temp_dir)
        assert out == temp_dir / "pair0_spectrum.png"
        assert out.exists()

    def test_svg_output(self, make_config, spectrum, temp_dir):
        config = make_config(visualization={"output_format": "svg", "title": "Scope"})
        out = SpectrumPlotter(config).plot(spectrum, temp_dir / "tone.svg")
        assert out.suffix == ".svg"
        assert "<svg" in out.read_text(encoding="utf-8")

    def test_figures_are_closed(self, internal_config, spectrum, temp_dir):
        import matplotlib.pyplot as plt

        before = len(plt.get_fignums())
        SpectrumPlotter(internal_config).plot(spectrum, temp_dir / "a.png")
        assert len(plt.get_fignums()) == before
