"""
Element-type traits for spectrum buffers.

Every operation in fftpost is written once and specialized by the buffer's
dtype. This module answers the two questions the algorithms need about an
element type: is it complex, and which real precision do its components use.

Supported element types:
    - float32 / float64: real samples (single / double precision)
    - complex64 / complex128: complex samples (single / double precision)
"""

from dataclasses import dataclass

import numpy as np

from .errors import InvalidInputError

# Added to magnitudes before taking log10 so that empty bins do not map to -inf
DB_FLOOR = 1e-20


@dataclass(frozen=True)
class ElementTraits:
    """
    Description of a supported buffer element type.

    Attributes:
        dtype: Element dtype of the buffer
        real_dtype: dtype of a single real component (float32 or float64)
        is_complex: True for complex64 / complex128
        precision: 'single' or 'double'
    """
    dtype: np.dtype
    real_dtype: np.dtype
    is_complex: bool
    precision: str

    def scalar(self, value: float):
        """Return value as a real scalar in this precision."""
        return self.real_dtype.type(value)


_TRAITS = {
    np.dtype(np.float32): ElementTraits(np.dtype(np.float32), np.dtype(np.float32), False, 'single'),
    np.dtype(np.float64): ElementTraits(np.dtype(np.float64), np.dtype(np.float64), False, 'double'),
    np.dtype(np.complex64): ElementTraits(np.dtype(np.complex64), np.dtype(np.float32), True, 'single'),
    np.dtype(np.complex128): ElementTraits(np.dtype(np.complex128), np.dtype(np.float64), True, 'double'),
}

PRECISIONS = ('single', 'double')


def element_traits(dtype) -> ElementTraits:
    """
    Look up the traits of an element type.

    Args:
        dtype: Anything accepted by np.dtype

    Returns:
        ElementTraits for the dtype

    Raises:
        InvalidInputError: If the dtype is not one of the supported types
    """
    try:
        key = np.dtype(dtype)
    except TypeError as exc:
        raise InvalidInputError(f"Not a numpy dtype: {dtype!r}") from exc

    if key not in _TRAITS:
        supported = ', '.join(str(d) for d in _TRAITS)
        raise InvalidInputError(f"Unsupported element type {key}; expected one of: {supported}")
    return _TRAITS[key]


def complex_dtype(precision: str) -> np.dtype:
    """Complex dtype for a precision name ('single' -> complex64, 'double' -> complex128)."""
    if precision == 'single':
        return np.dtype(np.complex64)
    if precision == 'double':
        return np.dtype(np.complex128)
    raise InvalidInputError(f"Unknown precision: {precision!r} (expected 'single' or 'double')")


def real_dtype(precision: str) -> np.dtype:
    """Real dtype for a precision name ('single' -> float32, 'double' -> float64)."""
    return element_traits(complex_dtype(precision)).real_dtype


def check_buffer(buffer) -> ElementTraits:
    """
    Validate a spectrum buffer and return its element traits.

    The buffer must be a one-dimensional ndarray of a supported dtype. It is
    never copied or converted, so in-place operations and views act on the
    caller's storage.
    """
    if not isinstance(buffer, np.ndarray):
        raise InvalidInputError(f"Buffer must be a numpy.ndarray, got {type(buffer).__name__}")
    if buffer.ndim != 1:
        raise InvalidInputError(f"Buffer must be 1D, got shape {buffer.shape}")
    return element_traits(buffer.dtype)
