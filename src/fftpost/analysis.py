"""
Signal-level helpers built on the spectrum post-processing core.

These functions own the whole chain for a time-domain signal: cast to the
requested precision, run the (external) transform, and post-process the
result. The transform callables are parameters so another engine can be
plugged in; they default to the scipy adapter in fftpost.engine.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from . import engine
from .errors import InvalidInputError
from .normalize import scale_in_place
from .precision import complex_dtype, real_dtype
from .spectrum import MIN_LENGTH, get_single_sided_complex_scaled, get_single_sided_spectrum
from .utils.logging import get_logger

logger = get_logger(__name__)

Transform = Callable[[np.ndarray], np.ndarray]


@dataclass
class SpectrumResult:
    """
    Post-processed spectrum of one signal.

    Attributes:
        points: Structured array with 'frequency' and 'amplitude' fields
        scaled: Single-sided complex bins scaled by 2/N
        sample_rate: Sampling rate of the signal in Hz
        in_db: Whether points['amplitude'] is in dB
        n_samples: Transform length N
    """
    points: np.ndarray
    scaled: np.ndarray
    sample_rate: float
    in_db: bool
    n_samples: int

    @property
    def frequencies(self) -> np.ndarray:
        return self.points['frequency']

    @property
    def amplitudes(self) -> np.ndarray:
        return self.points['amplitude']

    def peak(self):
        """(frequency, amplitude) of the strongest reported bin."""
        idx = int(np.argmax(self.points['amplitude']))
        return float(self.points['frequency'][idx]), float(self.points['amplitude'][idx])


def _cast_signal(signal, precision: Optional[str]) -> np.ndarray:
    signal = np.asarray(signal)
    if signal.ndim != 1:
        raise InvalidInputError(f"Signal must be 1D, got shape {signal.shape}")
    if signal.shape[0] < MIN_LENGTH:
        raise InvalidInputError(f"Signal too short: {signal.shape[0]} samples (need at least {MIN_LENGTH})")

    is_complex = np.iscomplexobj(signal)
    if precision is None:
        if signal.dtype in (np.float32, np.complex64):
            precision = 'single'
        else:
            precision = 'double'

    target = complex_dtype(precision) if is_complex else real_dtype(precision)
    return signal.astype(target, copy=False)


def analyze_signal(
    signal,
    sample_rate: float,
    in_db: bool = False,
    precision: Optional[str] = None,
    forward: Transform = engine.forward,
) -> SpectrumResult:
    """
    Transform a time-domain signal and extract its single-sided spectrum.

    Args:
        signal: 1D real or complex samples
        sample_rate: Sampling rate in Hz
        in_db: Report amplitudes in dB
        precision: 'single' or 'double'; if None, inferred from the signal
            (float32 / complex64 -> single, anything else -> double)
        forward: Forward transform callable returning the full N-point spectrum

    Returns:
        SpectrumResult
    """
    x = _cast_signal(signal, precision)
    spectrum = np.asarray(forward(x))

    logger.debug(
        f"Forward transform: n={x.shape[0]}, input={x.dtype}, output={spectrum.dtype}"
    )

    points = get_single_sided_spectrum(spectrum, sample_rate, in_db=in_db)
    scaled = get_single_sided_complex_scaled(spectrum)

    logger.debug(f"Extracted {len(points)} bins (df={sample_rate / x.shape[0]:.6g} Hz, in_db={in_db})")

    return SpectrumResult(
        points=points,
        scaled=scaled,
        sample_rate=float(sample_rate),
        in_db=bool(in_db),
        n_samples=int(x.shape[0]),
    )


def round_trip(
    signal,
    precision: Optional[str] = None,
    forward: Transform = engine.forward,
    inverse: Transform = engine.inverse,
) -> np.ndarray:
    """
    Forward transform, inverse transform, then normalize by 1/N.

    With unnormalized transforms the result equals the input signal up to
    floating-point error. It is complex even for a real input.
    """
    x = _cast_signal(signal, precision)
    restored = np.array(inverse(forward(x)))
    logger.debug(f"Round trip: n={x.shape[0]}, dtype={restored.dtype}")

    scale_in_place(restored)
    return restored
