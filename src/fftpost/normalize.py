"""
Round-trip normalization.

An unnormalized forward transform followed by an unnormalized inverse
transform reproduces the original signal scaled by N. scale_in_place undoes
that factor on the caller's buffer.
"""

import numpy as np
from numba import jit

from .precision import check_buffer


@jit(nopython=True, cache=True)
def _scale_kernel(x: np.ndarray, factor) -> None:
    """Multiply every element of x by factor, in place (Numba JIT)."""
    for i in range(x.shape[0]):
        x[i] *= factor


def scale_in_place(buffer: np.ndarray) -> None:
    """
    Scale every element of a buffer by 1/N, where N is its length.

    Parameters
    ----------
    buffer : np.ndarray
        1D float32, float64, complex64 or complex128 array, typically the
        output of an inverse transform. Modified in place.

    Notes
    -----
    The factor is computed in the buffer's real precision, so complex64 data
    is multiplied by a float32 scalar and keeps its dtype. An empty buffer is
    left untouched.

    Examples
    --------
    >>> x = np.array([4.0, 8.0, 12.0, 16.0])
    >>> scale_in_place(x)
    >>> x
    array([1., 2., 3., 4.])
    """
    traits = check_buffer(buffer)

    n = buffer.shape[0]
    if n == 0:
        return

    _scale_kernel(buffer, traits.scalar(1.0) / traits.scalar(n))
