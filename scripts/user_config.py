"""specscope User Configuration.

This is the user-facing configuration file. Modify settings here to customize
the spectrum run. Expert defaults are in src/specscope/schemas/param.py

Usage:
    python scripts/run_spectrum.py capture.txt --config scripts/user_config.py
    python scripts/run_spectrum.py capture.txt --config scripts/user_config.py --pair-index 1
"""

CONFIG = {
    # ========================================================================
    # SPECTRUM
    # ========================================================================
    "SAMPLE_RATE": 1000.0,    # Sampling frequency in Hz
    "PAIR_INDEX": 0,          # Which (real, imag) column pair to analyze
    "DB_FLOOR": 1e-12,        # Added to |X| before 20*log10

    # ========================================================================
    # OUTPUT
    # ========================================================================
    "BASE_DIR": "./specscope_output",  # All outputs go here
    "WRITE_CSV": True,        # spectra/<file>_pair<N>_spectrum.csv
    "PLOT": True,             # plots/<file>_pair<N>_spectrum.png

    # ========================================================================
    # ADVANCED (nested overrides)
    # ========================================================================
    "visualization": {
        "dpi": 150,
        "figsize": (12, 6),
        "output_format": "png",
    },
}
