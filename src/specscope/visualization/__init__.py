"""Visualization and plotting module for spectra."""

from .plotter import SpectrumPlotter

__all__ = ['SpectrumPlotter']
