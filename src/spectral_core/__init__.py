"""
Spectral Core - Hand-written DFT, Complex Statistics and FFT Interpolation

This package provides from-scratch implementations of three numeric building
blocks for 1-D signal processing, checked against numpy/scipy.

Modules:
    - fft: DFT engine (radix-2, mixed-radix and Bluestein FFT) and fftshift/ifftshift
    - stats: sum, mean, variance, covariance, correlation over complex sequences
    - interpolation: interpft, FFT-based resampling
"""

from .exceptions import InvalidArgumentError
from .complex_math import approx_equal, allclose
from .fft import fft, ifft, dft, fftshift, ifftshift
from .stats import (
    sum,
    mean,
    dot_product,
    variance,
    standard_deviation,
    covariance,
    pearson_correlation,
    normalize_by_size_of_list,
    scale_by_size_of_list,
)
from .interpolation import interpft

__all__ = [
    # Errors
    'InvalidArgumentError',
    # Complex helpers
    'approx_equal',
    'allclose',
    # FFT functions
    'fft',
    'ifft',
    'dft',
    'fftshift',
    'ifftshift',
    # Statistics
    'sum',
    'mean',
    'dot_product',
    'variance',
    'standard_deviation',
    'covariance',
    'pearson_correlation',
    'normalize_by_size_of_list',
    'scale_by_size_of_list',
    # Interpolation
    'interpft',
]

__version__ = '1.0.0'
