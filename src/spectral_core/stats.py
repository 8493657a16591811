"""
Descriptive statistics over real and complex sequences.

Every function works on the complex representation internally. Real input
returns real scalars, complex input returns complex scalars; variance and
standard deviation are always real. float32/complex64 input narrows the
result to the same precision.

Notes on complex input:
    - dot_product is bilinear: sum(a_i * b_i), neither operand is conjugated.
    - covariance conjugates the second centred operand by default (the
      numpy.cov convention), so covariance(a, a) == variance(a) and
      pearson_correlation(a, a) == 1 + 0j for complex a as well.
"""

import numpy as np

from .complex_math import as_complex_array, as_sequence, real_dtype, result_dtype
from .exceptions import InvalidArgumentError


def _to_scalar(value, dtype: np.dtype):
    """Cast a complex intermediate to the caller's scalar type."""
    if dtype.kind == 'c':
        return dtype.type(value)
    return dtype.type(np.real(value))


def _pair_dtype(a: np.ndarray, b: np.ndarray) -> np.dtype:
    return np.result_type(result_dtype(a), result_dtype(b))


def _check_pair(a, b, operation: str, min_length: int):
    """Validate two sequences of equal length with at least min_length samples."""
    a = as_sequence(a, 'a')
    b = as_sequence(b, 'b')
    if len(a) != len(b):
        raise InvalidArgumentError(
            f"{operation} requires sequences of equal length, got {len(a)} and {len(b)}"
        )
    if len(a) < min_length:
        raise InvalidArgumentError(
            f"{operation} requires at least {min_length} samples, got {len(a)}"
        )
    return a, b


def _deviations(s: np.ndarray) -> np.ndarray:
    c = as_complex_array(s)
    return c - c.mean()


def sum(s):
    """Sum of all samples. Empty input sums to zero."""
    s = as_sequence(s, 's')
    return _to_scalar(as_complex_array(s).sum(), result_dtype(s))


def mean(s):
    """
    Arithmetic mean.

    Raises:
        InvalidArgumentError: if s is empty
    """
    s = as_sequence(s, 's')
    if len(s) == 0:
        raise InvalidArgumentError("mean requires at least 1 sample, got 0")
    return _to_scalar(as_complex_array(s).sum() / len(s), result_dtype(s))


def dot_product(a, b):
    """
    Bilinear dot product sum(a_i * b_i), without complex conjugation.

    Args:
        a: First sequence
        b: Second sequence, same length as a

    Returns:
        Scalar product (real for real input)

    Raises:
        InvalidArgumentError: if the lengths differ or the sequences are empty
    """
    a, b = _check_pair(a, b, 'dot_product', min_length=1)
    value = np.dot(as_complex_array(a), as_complex_array(b))
    return _to_scalar(value, _pair_dtype(a, b))


def variance(s):
    """
    Sample variance with Bessel's correction.

    var = sum(|s_i - mean(s)|^2) / (N - 1)

    |.| is the complex magnitude, so the result is a non-negative real
    number for complex input too.

    Raises:
        InvalidArgumentError: if s has fewer than 2 samples
    """
    s = as_sequence(s, 's')
    if len(s) < 2:
        raise InvalidArgumentError(f"variance requires at least 2 samples, got {len(s)}")
    dev = _deviations(s)
    value = np.sum(dev.real ** 2 + dev.imag ** 2) / (len(s) - 1)
    return real_dtype(s).type(value)


def standard_deviation(s):
    """Square root of the sample variance."""
    var = variance(s)
    return type(var)(np.sqrt(var))


def covariance(a, b, conjugate: bool = True):
    """
    Sample covariance of two sequences.

    cov = sum((a_i - mean(a)) * conj(b_i - mean(b))) / (N - 1)

    Args:
        a: First sequence
        b: Second sequence, same length as a
        conjugate: Conjugate the centred second operand (default). With
            False the purely bilinear form is used. Both agree for real input.

    Returns:
        Covariance (real for real input)

    Raises:
        InvalidArgumentError: if the lengths differ or are below 2
    """
    a, b = _check_pair(a, b, 'covariance', min_length=2)
    dev_b = _deviations(b)
    if conjugate:
        dev_b = np.conj(dev_b)
    value = np.dot(_deviations(a), dev_b) / (len(a) - 1)
    return _to_scalar(value, _pair_dtype(a, b))


def pearson_correlation(a, b):
    """
    Pearson correlation coefficient.

    r = cov(a, b) / sqrt(var(a) * var(b))

    Complex input gives a complex coefficient; pearson_correlation(a, a) is
    1 + 0j.

    Raises:
        InvalidArgumentError: if the lengths differ or are below 2, or if
            either sequence is constant (zero variance)
    """
    a, b = _check_pair(a, b, 'pearson_correlation', min_length=2)
    denominator = np.sqrt(float(variance(a)) * float(variance(b)))
    if denominator == 0.0:
        raise InvalidArgumentError("pearson_correlation is undefined for a constant sequence")
    value = complex(covariance(a, b)) / denominator
    return _to_scalar(value, _pair_dtype(a, b))


def normalize_by_size_of_list(s) -> np.ndarray:
    """Divide every sample by the sequence length. Empty input gives an empty array."""
    s = as_sequence(s, 's')
    arr = np.asarray(s, dtype=result_dtype(s))
    if len(arr) == 0:
        return arr.copy()
    return arr / len(arr)


def scale_by_size_of_list(s) -> np.ndarray:
    """Multiply every sample by the sequence length."""
    s = as_sequence(s, 's')
    arr = np.asarray(s, dtype=result_dtype(s))
    return arr * len(arr)
