#!/usr/bin/env python3
"""
Single-Sided Spectrum Extraction Script

Transforms a time-domain signal stored as .npy and writes its single-sided
spectrum (frequency / amplitude pairs plus the 2/N scaled complex bins).

Usage:
    python scripts/extract_spectrum.py --input signal.npy
    python scripts/extract_spectrum.py --input signal.npy --config configs/default.yaml --db
    python scripts/extract_spectrum.py --input signal.npy --sample-rate 8000 --output out.csv
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
from rich.console import Console
from rich.table import Table
from rich import box

# Add src to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from fftpost import SpectrumConfig, analyze_signal, load_config
from fftpost.analysis import SpectrumResult
from fftpost.config import OUTPUT_FORMATS
from fftpost.utils.logging import get_logger, setup_logging

DEFAULT_CONFIG = PROJECT_ROOT / 'configs' / 'default.yaml'

console = Console(stderr=True)
logger = get_logger('extract_spectrum')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Extract the single-sided spectrum of a signal')
    parser.add_argument('--input', type=str, required=True,
                        help='Path to a 1D signal saved with numpy.save (.npy)')
    parser.add_argument('--config', type=str, default=None,
                        help=f'YAML config (default: {DEFAULT_CONFIG.relative_to(PROJECT_ROOT)})')
    parser.add_argument('--output', type=str, default=None,
                        help='Output path (default: <input>_spectrum.<format>)')
    parser.add_argument('--sample-rate', type=float, default=None,
                        help='Override sample_rate (Hz)')
    parser.add_argument('--db', action=argparse.BooleanOptionalAction, default=None,
                        help='Report amplitudes in dB (--no-db for linear)')
    parser.add_argument('--precision', choices=['single', 'double'], default=None,
                        help='Override precision')
    parser.add_argument('--format', dest='output_format', choices=['npz', 'csv'], default=None,
                        help='Override output format')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Write a detailed log to this file')
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> SpectrumConfig:
    """Load the YAML config and apply command-line overrides."""
    config_path = Path(args.config) if args.config else DEFAULT_CONFIG
    config = load_config(config_path)

    output_format = args.output_format
    if output_format is None and args.output:
        # Fall back to the output suffix when it names a known format
        suffix = Path(args.output).suffix.lstrip(".").lower()
        output_format = suffix if suffix in OUTPUT_FORMATS else None

    return config.replace(
        sample_rate=args.sample_rate,
        in_db=args.db,
        precision=args.precision,
        output_format=output_format,
    )


def default_output_path(input_path: Path, output_format: str) -> Path:
    return input_path.with_name(f'{input_path.stem}_spectrum.{output_format}')


def save_result(result: SpectrumResult, output_path: Path, output_format: str) -> None:
    """Write a SpectrumResult as .npz or .csv."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if output_format == 'npz':
        # Through a handle so numpy does not append .npz to other suffixes
        with open(output_path, 'wb') as f:
            np.savez(
                f,
                frequency=result.frequencies,
                amplitude=result.amplitudes,
                scaled=result.scaled,
                sample_rate=result.sample_rate,
                in_db=result.in_db,
            )
    else:
        unit = 'amplitude_db' if result.in_db else 'amplitude'
        table = np.column_stack([result.frequencies, result.amplitudes])
        np.savetxt(output_path, table, delimiter=',', header=f'frequency,{unit}', comments='')


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(log_file=args.log_file, level=logging.DEBUG if args.log_file else logging.INFO)

    try:
        config = resolve_config(args)
        input_path = Path(args.input)
        signal = np.load(input_path)
        logger.info(f"Loaded {input_path}: shape={signal.shape}, dtype={signal.dtype}")
        logger.info(f"Config: {config.to_dict()}")

        result = analyze_signal(
            signal,
            config.sample_rate,
            in_db=config.in_db,
            precision=config.precision,
        )

        output_path = Path(args.output) if args.output else default_output_path(input_path, config.output_format)
        save_result(result, output_path, config.output_format)
        logger.info(f"Wrote {len(result.points)} bins to {output_path}")
    except (ValueError, OSError) as exc:
        logger.error(str(exc))
        console.print(f"[bold red]Error:[/bold red] {exc}")
        return 1

    summary = Table(title="Spectrum extraction", box=box.ROUNDED)
    summary.add_column("Setting", style="cyan")
    summary.add_column("Value", style="green")
    summary.add_row("Input", str(input_path))
    summary.add_row("Samples", str(result.n_samples))
    summary.add_row("Bins", str(len(result.points)))
    summary.add_row("Sample rate", f"{config.sample_rate:g} Hz")
    summary.add_row("Units", "dB" if config.in_db else "linear")
    summary.add_row("Precision", config.precision)
    summary.add_row("Output", str(output_path))
    console.print(summary)
    return 0


if __name__ == '__main__':
    sys.exit(main())
