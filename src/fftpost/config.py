"""
Run configuration for spectrum extraction.

Configs are small YAML files, e.g. configs/default.yaml:

    sample_rate: 48000
    in_db: true
    precision: single
    output_format: npz
"""

import math
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import InvalidInputError
from .precision import PRECISIONS

OUTPUT_FORMATS = ('npz', 'csv')


@dataclass
class SpectrumConfig:
    """
    Parameters for one extraction run.

    Attributes:
        sample_rate: Sampling rate of the input signal in Hz
        in_db: Report amplitudes in dB instead of linear units
        precision: 'single' (float32/complex64) or 'double' (float64/complex128)
        output_format: 'npz' or 'csv'
    """
    sample_rate: float
    in_db: bool = False
    precision: str = 'double'
    output_format: str = 'npz'

    def __post_init__(self):
        try:
            self.sample_rate = float(self.sample_rate)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"sample_rate must be a number, got {self.sample_rate!r}") from exc
        if not math.isfinite(self.sample_rate) or self.sample_rate <= 0:
            raise InvalidInputError(f"sample_rate must be a positive finite number, got {self.sample_rate}")
        if not isinstance(self.in_db, bool):
            raise InvalidInputError(f"in_db must be true or false, got {self.in_db!r}")
        if self.precision not in PRECISIONS:
            raise InvalidInputError(f"precision must be one of {PRECISIONS}, got {self.precision!r}")
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidInputError(f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SpectrumConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidInputError(f"Unknown config keys: {', '.join(unknown)}")
        if 'sample_rate' not in data:
            raise InvalidInputError("Config is missing required key 'sample_rate'")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def replace(self, **overrides) -> 'SpectrumConfig':
        """Copy with the non-None overrides applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return SpectrumConfig.from_dict(data)


def load_config(config_path: Union[str, Path]) -> SpectrumConfig:
    """Load configuration from YAML file."""
    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise InvalidInputError(f"Config file {config_path} is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidInputError(f"Config file {config_path} must contain a mapping")
    return SpectrumConfig.from_dict(data)
