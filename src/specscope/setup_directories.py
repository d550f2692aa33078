"""
Directory setup for spectrum runs.

- spectra/: CSV exports, one per data file and channel
- plots/: rendered spectrum images
- logs/: run logs
"""

from pathlib import Path


def setup_output_directories(base_output_dir=None):
    """
    Set up organized output directory structure.

    Parameters
    ----------
    base_output_dir : str or Path, optional
        Base output directory. If None, ./specscope_output is used.

    Returns
    -------
    dict
        Dictionary with paths: 'base', 'spectra', 'plots', 'logs'
    """
    if base_output_dir is None:
        base_output_dir = Path.cwd() / "specscope_output"

    base_output_dir = Path(base_output_dir).expanduser().resolve()

    directories = {
        "base": base_output_dir,
        "spectra": base_output_dir / "spectra",
        "plots": base_output_dir / "plots",
        "logs": base_output_dir / "logs",
    }

    for path in directories.values():
        path.mkdir(parents=True, exist_ok=True)

    return directories


def get_output_stem(source, pair_index):
    """
    File stem for outputs derived from `source` channel `pair_index`.

    Example
    -------
    >>> get_output_stem("capture/scope_01.txt", 1)
    'scope_01_pair1'
    """
    return f"{Path(source).stem}_pair{pair_index}"
