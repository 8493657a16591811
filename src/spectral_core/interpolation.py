"""
FFT-based (trigonometric) interpolation.

interpft resamples a periodic, band-limited sequence to a new length by
zero-padding its spectrum around the Nyquist bin. Results match MATLAB's
interpft, including the downsampling policy for target lengths that do not
exceed the input length.
"""

import logging
import numbers

import numpy as np

from .complex_math import (
    as_complex_array,
    as_sequence,
    complex_dtype,
    is_complex_input,
    real_dtype,
)
from .exceptions import InvalidArgumentError
from .fft import fft, ifft

logger = logging.getLogger(__name__)


def _pad_spectrum(X: np.ndarray, length: int) -> np.ndarray:
    """
    Zero-pad a length-N spectrum to ``length`` (> N) bins around the Nyquist bin.

    For even N the Nyquist coefficient is split in half between the last
    positive and the first negative frequency bin of the padded spectrum.
    """
    n = len(X)
    nyqst = (n + 2) // 2  # ceil((n + 1) / 2)
    n_zeros = length - n

    padded = np.concatenate([
        X[:nyqst],
        np.zeros(n_zeros, dtype=np.complex128),
        X[nyqst:],
    ])

    if n % 2 == 0:
        padded[nyqst - 1] = padded[nyqst - 1] / 2
        padded[nyqst + n_zeros - 1] = padded[nyqst - 1]

    return padded


def interpft(x, m: int) -> np.ndarray:
    """
    Resample x to length m using FFT zero-padding.

    Parameters
    ----------
    x : array_like
        1-D real or complex sequence of length N >= 1, assumed periodic.
    m : int
        Number of output samples, m >= 1.

    Returns
    -------
    np.ndarray
        Length-m sequence. Real input returns the real part only (float32 for
        float32 input, float64 otherwise); complex input returns complex.

    Notes
    -----
    When m <= N the sequence is first interpolated to incr * m samples,
    with incr = N // m + 1, and then every incr-th sample is kept. This makes
    interpft(x, N) reproduce x for odd and even N.

    Examples
    --------
    >>> y = interpft([10.0, 12.0, 15.0], 10)
    >>> len(y)
    10
    """
    x = as_sequence(x)
    n = len(x)
    if n == 0:
        raise InvalidArgumentError("interpft requires at least 1 sample, got 0")
    if isinstance(m, bool) or not isinstance(m, numbers.Integral):
        raise InvalidArgumentError(f"interpft target length must be an integer, got {m!r}")
    m = int(m)
    if m < 1:
        raise InvalidArgumentError(f"interpft target length must be positive, got {m}")

    if m > n:
        incr = 1
    else:
        incr = n // m + 1
    length = incr * m

    logger.debug("interpft: %d -> %d samples (work length %d, step %d)", n, m, length, incr)

    X = fft(as_complex_array(x))
    y = ifft(_pad_spectrum(X, length)) * (length / n)
    y = y[::incr]

    if is_complex_input(x):
        return y.astype(complex_dtype(x))
    return np.real(y).astype(real_dtype(x))
