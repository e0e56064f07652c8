"""
Single-sided spectrum extraction.

The input is the full output of a length-N forward DFT in conventional bin
order: index 0 is DC, indices increase through the positive frequencies up to
Nyquist (index N/2 for even N) and then run back down the negative ones.

All three extractors share one length rule:

    len = N // 2 + N % 2

and report source indices 1..len, i.e. DC is skipped and Nyquist is kept
when N is even. Amplitude outputs apply the single-sided factor 2/N to every
reported bin, the Nyquist bin included.
"""

import numpy as np
from numba import jit

from .errors import InvalidInputError
from .precision import DB_FLOOR, check_buffer

# Buffers shorter than this have no frequency content besides DC
MIN_LENGTH = 2


def single_sided_length(n: int) -> int:
    """
    Number of bins in the single-sided spectrum of a length-n transform.

    n // 2 for even n, (n + 1) // 2 for odd n.
    """
    return n // 2 + n % 2


def spectrum_point_dtype(real_dtype) -> np.dtype:
    """Structured dtype of a (frequency, amplitude) record in the given precision."""
    real_dtype = np.dtype(real_dtype)
    return np.dtype([('frequency', real_dtype), ('amplitude', real_dtype)])


def amplitude_to_db(magnitude, floor: float = DB_FLOOR):
    """
    Convert linear amplitude to dB.

    dB = 20 * log10(magnitude + floor)

    The floor keeps zero magnitudes finite (1e-20 maps to -400 dB). The result
    has the precision of the input.
    """
    magnitude = np.asarray(magnitude)
    if not np.issubdtype(magnitude.dtype, np.floating):
        magnitude = magnitude.astype(np.float64)
    return 20.0 * np.log10(magnitude + magnitude.dtype.type(floor))


def _check_length(buffer: np.ndarray) -> int:
    n = buffer.shape[0]
    if n < MIN_LENGTH:
        raise InvalidInputError(f"FFT length too small: {n} (need at least {MIN_LENGTH})")
    return n


@jit(nopython=True, cache=True)
def _spectrum_kernel(x, n_bins, df, scale, freqs, mags):
    """
    Fill frequency / scaled magnitude arrays for source bins 1..n_bins (Numba JIT).
    """
    for k in range(1, n_bins + 1):
        mags[k - 1] = abs(x[k]) * scale
        freqs[k - 1] = k * df


def get_single_sided_spectrum(buffer: np.ndarray, sample_rate: float, in_db: bool = False) -> np.ndarray:
    """
    Single-sided amplitude spectrum of a full DFT result.

    Parameters
    ----------
    buffer : np.ndarray
        Full forward-transform output of length N >= 2
    sample_rate : float
        Sampling rate of the time-domain signal in Hz
    in_db : bool
        If True, amplitudes are 20*log10(magnitude + 1e-20) instead of linear

    Returns
    -------
    np.ndarray
        Structured array of length N // 2 + N % 2 with fields 'frequency'
        and 'amplitude', in the real precision of the buffer. Frequencies
        start at sample_rate / N and increase by sample_rate / N.

    Raises
    ------
    InvalidInputError
        If N < 2 or sample_rate is not a positive finite number

    Examples
    --------
    >>> X = np.ones(8, dtype=np.complex128)
    >>> spec = get_single_sided_spectrum(X, sample_rate=1000.0)
    >>> spec['frequency']
    array([125., 250., 375., 500.])
    >>> spec['amplitude']
    array([0.25, 0.25, 0.25, 0.25])
    """
    traits = check_buffer(buffer)
    n = _check_length(buffer)
    if not np.isfinite(sample_rate) or sample_rate <= 0:
        raise InvalidInputError(f"sample_rate must be a positive finite number, got {sample_rate}")

    n_bins = single_sided_length(n)
    freqs = np.empty(n_bins, dtype=traits.real_dtype)
    mags = np.empty(n_bins, dtype=traits.real_dtype)

    df = traits.scalar(sample_rate) / traits.scalar(n)  # frequency resolution
    scale = traits.scalar(2.0) / traits.scalar(n)
    _spectrum_kernel(buffer, n_bins, df, scale, freqs, mags)

    spectrum = np.empty(n_bins, dtype=spectrum_point_dtype(traits.real_dtype))
    spectrum['frequency'] = freqs
    spectrum['amplitude'] = amplitude_to_db(mags) if in_db else mags
    return spectrum


def get_single_sided(buffer: np.ndarray) -> np.ndarray:
    """
    Non-owning view of the single-sided bins of a full DFT result.

    Returns buffer[1 : 1 + len] as a numpy view: no copy, no scaling. Writes
    through the view land in the source buffer, and the view is only
    meaningful while the source buffer is alive and that range unchanged by
    anyone else.

    Use this when phase matters or when the bins will be modified and fed back
    to an inverse transform; scaling here would corrupt the round trip.
    """
    check_buffer(buffer)
    n = _check_length(buffer)
    return buffer[1:1 + single_sided_length(n)]


def get_single_sided_complex_scaled(buffer: np.ndarray) -> np.ndarray:
    """
    Newly allocated single-sided bins scaled by 2/N.

    result[k - 1] = buffer[k] * 2 / N for k = 1..len. The result has the
    buffer's dtype and its own storage, so magnitudes or powers can be taken
    from it directly without touching the source.
    """
    traits = check_buffer(buffer)
    n = _check_length(buffer)
    scale = traits.scalar(2.0) / traits.scalar(n)
    return buffer[1:1 + single_sided_length(n)] * scale
