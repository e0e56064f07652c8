"""
fftpost - Post-processing for discrete Fourier transform output

Takes the full complex output of an external FFT engine and turns it into
something analysis and visualization code can use.

Modules:
    - normalize: 1/N scaling after a forward/inverse round trip
    - spectrum: single-sided spectrum extraction (amplitude / dB points,
      non-owning view, 2/N scaled complex copy)
    - precision: element-type traits (float32/float64/complex64/complex128)
    - engine: unnormalized scipy.fft adapter
    - analysis: signal-level helpers
    - config: YAML run configuration
"""

from .errors import InvalidInputError
from .normalize import scale_in_place
from .spectrum import (
    single_sided_length,
    spectrum_point_dtype,
    amplitude_to_db,
    get_single_sided_spectrum,
    get_single_sided,
    get_single_sided_complex_scaled,
)
from .precision import ElementTraits, element_traits
from .analysis import SpectrumResult, analyze_signal, round_trip
from .config import SpectrumConfig, load_config

__all__ = [
    'InvalidInputError',
    # Normalizer
    'scale_in_place',
    # Spectrum extraction
    'single_sided_length',
    'spectrum_point_dtype',
    'amplitude_to_db',
    'get_single_sided_spectrum',
    'get_single_sided',
    'get_single_sided_complex_scaled',
    # Element traits
    'ElementTraits',
    'element_traits',
    # Signal helpers
    'SpectrumResult',
    'analyze_signal',
    'round_trip',
    # Configuration
    'SpectrumConfig',
    'load_config',
]

__version__ = '1.0.0'
