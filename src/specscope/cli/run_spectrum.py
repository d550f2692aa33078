"""Spectrum run: data file in, CSV and plot out.

This module contains the actual runner, separated from argument parsing in
main(). main() is exposed as the ``specscope`` console script.

Usage:
    specscope capture.txt --sample-rate 1000
    specscope capture.txt --config my_config.py --pair-index 1 --no-plot
"""

import argparse
import importlib.util
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from specscope.ingest import Dataset, IngestError
from specscope.pipeline.session import SpectrumSession
from specscope.schemas import CLIConfig, InternalConfig, ParamConfig, UserConfig, resolve_config
from specscope.setup_directories import get_output_stem, setup_output_directories
from specscope.spectral import PairIndexError, Spectrum
from specscope.visualization import SpectrumPlotter

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


@dataclass(frozen=True)
class SpectrumRunResult:
    dataset: Dataset
    spectrum: Spectrum
    config: InternalConfig
    csv_path: Optional[Path] = None
    plot_path: Optional[Path] = None


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Parameters
    ----------
    config_path : str
        Path to user config Python file containing CONFIG dict.

    Returns
    -------
    dict
        Raw user configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If the file cannot be loaded as Python, or no CONFIG dict is found.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load config module from {path}")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise ValueError(f"Error executing config {path}: {e}") from e

    # Find CONFIG dict
    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def setup_logging(level: str = "INFO", log_path: Optional[Path] = None) -> None:
    """Configure the root logger with a console and an optional file handler."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Clear existing handlers and add new ones
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    if log_path is not None:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    logger.debug("Logging: level=%s, file=%s", level, log_path)


def run_spectrum(
    data_path: str,
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
    configure_logging: bool = True,
) -> SpectrumRunResult:
    """Parse one data file and produce its spectrum outputs.

    This is the core runner. It:
    1. Loads and resolves configuration (Param < User < CLI)
    2. Sets up output directories (default: next to the data file)
    3. Reads the file (UTF-8) and parses it into a Dataset
    4. Computes the spectrum of the configured channel
    5. Writes the CSV export and the plot, if enabled

    Parameters
    ----------
    data_path : str
        Text file with whitespace-delimited (real, imag) columns.
    user_config_path : str, optional
        Python file with a CONFIG dict.
    cli_args : dict, optional
        CLI overrides. Keys: sample_rate, pair_index, base_dir, no_plot,
        log_level. All optional.
    verbose : bool, optional
        If True, enable DEBUG logging and log the full resolved config.
    configure_logging : bool, optional
        Install console/file handlers on the root logger (default True).

    Raises
    ------
    FileNotFoundError
        If `data_path` or `user_config_path` does not exist.
    IngestError
        If the data file is rejected.
    PairIndexError
        If the configured channel does not exist.
    ValidationError
        If configuration validation fails.
    """
    path = Path(data_path)
    if not path.is_file():
        raise FileNotFoundError(f"Data file not found: {path}")

    param_cfg = ParamConfig()  # Expert defaults

    user_cfg = UserConfig()
    if user_config_path is not None:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))

    cli_args = dict(cli_args or {})
    if verbose and cli_args.get("log_level") is None:
        cli_args["log_level"] = "DEBUG"

    # Filter None values
    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    config = resolve_config(param_cfg, user_cfg, cli_cfg)

    base_dir = config.output.base_dir or path.resolve().parent / "specscope_output"
    output_dirs = setup_output_directories(base_dir)

    if configure_logging:
        setup_logging(config.logging.level, output_dirs["logs"] / "specscope.log")

    logger.info("=" * 60)
    logger.info("specscope spectrum run")
    logger.info("Data:        %s", path)
    logger.info("Sample rate: %g Hz", config.spectrum.sample_rate)
    logger.info("Pair index:  %d", config.spectrum.pair_index)
    logger.info("Output:      %s", output_dirs["base"])
    logger.info("=" * 60)
    if verbose:
        logger.debug("Full internal configuration:\n%s", json.dumps(config.model_dump(), indent=2))

    session = SpectrumSession(config)
    dataset = session.load(path.read_text(encoding="utf-8"))
    spectrum = session.spectrum()

    stem = get_output_stem(path, spectrum.pair_index)

    csv_path = None
    if config.output.write_csv:
        csv_path = output_dirs["spectra"] / f"{stem}_spectrum.csv"
        spectrum.to_frame().to_csv(csv_path, index=False)
        logger.info("Spectrum CSV saved: %s", csv_path)

    plot_path = None
    if config.visualization.enabled:
        plotter = SpectrumPlotter(config)
        plot_path = plotter.plot(
            spectrum,
            output_dirs["plots"] / plotter.default_filename(stem),
            title=f"{path.name}: {spectrum.channel_name}",
        )

    return SpectrumRunResult(
        dataset=dataset,
        spectrum=spectrum,
        config=config,
        csv_path=csv_path,
        plot_path=plot_path,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="specscope",
        description="Plot the frequency spectrum of whitespace-delimited complex samples",
    )
    parser.add_argument("data", help="Text file with (real, imag) column pairs")
    parser.add_argument("--config", help="Path to user config file (Python, CONFIG dict)")
    parser.add_argument("--sample-rate", type=float, help="Sampling frequency in Hz")
    parser.add_argument("--pair-index", type=int, help="Channel (pair column) to analyze")
    parser.add_argument("--base-dir", help="Output directory")
    parser.add_argument("--no-plot", action="store_true", help="Skip the plot")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    cli_args = {
        "sample_rate": args.sample_rate,
        "pair_index": args.pair_index,
        "base_dir": args.base_dir,
        "no_plot": True if args.no_plot else None,
    }

    try:
        result = run_spectrum(args.data, args.config, cli_args, verbose=args.verbose)
    except (IngestError, PairIndexError) as e:
        logger.error("%s", e)
        return 1
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2
    except (FileNotFoundError, ValueError) as e:
        # Missing data file, or a config file that is missing or cannot be loaded
        print(str(e), file=sys.stderr)
        return 2

    print(
        f"Spectrum of {args.data}: {result.spectrum.num_samples} bins, "
        f"pair {result.spectrum.pair_index}, {result.spectrum.sample_rate:g} Hz"
    )
    if result.csv_path:
        print(f"  CSV:  {result.csv_path}")
    if result.plot_path:
        print(f"  Plot: {result.plot_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
