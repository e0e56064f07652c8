"""
Adapter over scipy.fft used as the external transform engine.

Both directions are unnormalized, like FFTW: forward() applies no factor and
neither does inverse(), so inverse(forward(x)) == N * x. scale_in_place()
removes that factor. scipy.fft keeps single precision inputs in single
precision (float32 / complex64 -> complex64).
"""

import numpy as np
import scipy.fft


def forward(signal: np.ndarray) -> np.ndarray:
    """Unnormalized forward DFT of a real or complex 1D signal."""
    return scipy.fft.fft(signal, norm='backward')


def inverse(spectrum: np.ndarray) -> np.ndarray:
    """
    Unnormalized inverse DFT.

    norm='forward' places the 1/N factor on the forward transform, which
    leaves this direction unscaled.
    """
    return scipy.fft.ifft(spectrum, norm='forward')
