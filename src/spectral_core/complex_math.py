"""
Complex arithmetic helpers shared by the FFT, statistics and interpolation modules.

Python's ``complex`` and numpy's ``complex128`` already provide the value type
(add, subtract, multiply, divide, scale, real part). This module adds the
pieces the rest of the package needs on top of it:

    - as_complex_array: embed real or complex sequences as complex128
    - result_dtype: precision policy (float32/complex64 input narrows output)
    - approx_equal / allclose: epsilon comparisons for accumulated FFT error
"""

import numpy as np
from typing import Union

from .exceptions import InvalidArgumentError

Number = Union[int, float, complex, np.number]

DEFAULT_EPS = 1e-9


def is_complex_input(x) -> bool:
    """True if the sequence holds complex values."""
    return np.iscomplexobj(np.asarray(x))


def result_dtype(x) -> np.dtype:
    """
    Output dtype for a sequence.

    float32 -> float32, complex64 -> complex64; everything else is widened to
    float64 or complex128.
    """
    arr = np.asarray(x)
    if np.iscomplexobj(arr):
        return np.dtype(np.complex64) if arr.dtype == np.complex64 else np.dtype(np.complex128)
    return np.dtype(np.float32) if arr.dtype == np.float32 else np.dtype(np.float64)


def complex_dtype(x) -> np.dtype:
    """Complex dtype matching the precision of ``x``."""
    dtype = result_dtype(x)
    if dtype in (np.float32, np.complex64):
        return np.dtype(np.complex64)
    return np.dtype(np.complex128)


def real_dtype(x) -> np.dtype:
    """Real dtype matching the precision of ``x``."""
    dtype = result_dtype(x)
    if dtype in (np.float32, np.complex64):
        return np.dtype(np.float32)
    return np.dtype(np.float64)


def as_complex_array(x) -> np.ndarray:
    """Return a new complex128 copy of ``x``; real samples get a zero imaginary part."""
    arr = np.asarray(x)
    if arr.dtype == object:
        arr = np.array([complex(v) for v in arr.ravel()]).reshape(arr.shape)
    return np.array(arr, dtype=np.complex128, copy=True)


def as_sequence(x, name: str = 'x') -> np.ndarray:
    """Coerce ``x`` to a 1-D array, rejecting scalars and N-d input."""
    arr = np.asarray(x)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name} must be a 1-D sequence, got shape {arr.shape}")
    return arr


def approx_equal(a: Number, b: Number, eps: float = DEFAULT_EPS) -> bool:
    """Componentwise comparison: real and imaginary parts each within ``eps``."""
    a = complex(a)
    b = complex(b)
    return abs(a.real - b.real) <= eps and abs(a.imag - b.imag) <= eps


def allclose(a, b, eps: float = DEFAULT_EPS) -> bool:
    """``approx_equal`` over two sequences of equal length."""
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape:
        return False
    return bool(
        np.all(np.abs(a.real - b.real) <= eps)
        and np.all(np.abs(np.imag(a) - np.imag(b)) <= eps)
    )
