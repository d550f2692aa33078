"""Command-line interface modules for specscope."""

from specscope.cli.run_spectrum import run_spectrum, main

__all__ = ['run_spectrum', 'main']
