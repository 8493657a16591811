"""
DFT Engine for Arbitrary Lengths (Numba JIT + NumPy)

This module implements the forward/inverse discrete Fourier transform for any
sequence length, plus the fftshift/ifftshift spectrum permutations.

Algorithm per transform length N:
1. N a power of two: iterative radix-2 Cooley-Tukey (Numba JIT)
2. N prime, N <= DIRECT_DFT_MAX_LENGTH: direct O(N^2) DFT (Numba JIT)
3. N prime, larger: Bluestein chirp-z, convolution through power-of-two FFTs
4. Otherwise: mixed-radix Cooley-Tukey, one odd prime factor per level,
   the sub-transforms of a level are computed together as a batch of rows

All paths match the direct DFT within floating point tolerance.
"""

import logging
import math
from typing import Optional

import numpy as np
from numba import jit

from .complex_math import as_complex_array, as_sequence, complex_dtype
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# Largest prime length transformed by direct summation instead of Bluestein.
DIRECT_DFT_MAX_LENGTH = 64

_NORM_MODES = ('backward', 'ortho', 'forward')


@jit(nopython=True, cache=True)
def _bit_reverse(x: int, n_bits: int) -> int:
    """Reverse the bits of x with n_bits."""
    result = 0
    for _ in range(n_bits):
        result = (result << 1) | (x & 1)
        x >>= 1
    return result


@jit(nopython=True, cache=True)
def _fft_radix2_iter(x: np.ndarray) -> np.ndarray:
    """
    Iterative Cooley-Tukey radix-2 DIT FFT (Numba JIT).

    len(x) must be a power of two. Twiddles are evaluated directly per stage
    instead of by repeated multiplication so the error does not grow with N.
    """
    N = len(x)
    n_bits = int(math.log2(N))

    # Bit-reversal permutation
    X = np.empty(N, dtype=np.complex128)
    for i in range(N):
        j = _bit_reverse(i, n_bits)
        X[j] = x[i]

    # Process stages: size 2, 4, 8, ..., N
    stage_size = 2
    while stage_size <= N:
        half_size = stage_size // 2
        w_step = -2j * np.pi / stage_size

        twiddles = np.empty(half_size, dtype=np.complex128)
        for j in range(half_size):
            twiddles[j] = np.exp(w_step * j)

        for k in range(0, N, stage_size):
            for j in range(half_size):
                even_idx = k + j
                odd_idx = k + j + half_size

                even = X[even_idx]
                odd = X[odd_idx] * twiddles[j]

                X[even_idx] = even + odd
                X[odd_idx] = even - odd

        stage_size *= 2

    return X


@jit(nopython=True, cache=True)
def _dft_naive_jit(x: np.ndarray) -> np.ndarray:
    """Direct DFT, O(N^2) (JIT compiled)."""
    N = len(x)
    X = np.empty(N, dtype=np.complex128)

    for k in range(N):
        s = 0j
        for n in range(N):
            # Reduce k*n modulo N to keep the phase argument small
            s += x[n] * np.exp(-2j * np.pi * ((k * n) % N) / N)
        X[k] = s

    return X


@jit(nopython=True, cache=True)
def _fft_radix2_rows(rows: np.ndarray) -> np.ndarray:
    """Radix-2 FFT of every row of a (n_rows, 2^k) array."""
    n_rows, N = rows.shape
    result = np.empty((n_rows, N), dtype=np.complex128)
    for i in range(n_rows):
        result[i] = _fft_radix2_iter(rows[i])
    return result


@jit(nopython=True, cache=True)
def _dft_naive_rows(rows: np.ndarray) -> np.ndarray:
    """Direct DFT of every row of a 2-D array."""
    n_rows, N = rows.shape
    result = np.empty((n_rows, N), dtype=np.complex128)
    for i in range(n_rows):
        result[i] = _dft_naive_jit(rows[i])
    return result


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def _smallest_odd_factor(n: int) -> int:
    """
    Smallest odd prime factor of n (n must not be a power of two).

    Returns n itself when n is an odd prime.
    """
    odd = n
    while odd % 2 == 0:
        odd //= 2

    f = 3
    while f * f <= odd:
        if odd % f == 0:
            return f
        f += 2
    return odd


def _algorithm_name(n: int) -> str:
    """Name of the transform used for length n (for logging)."""
    if n <= 1:
        return 'identity'
    if _is_power_of_two(n):
        return 'radix-2'
    if _smallest_odd_factor(n) == n:
        return 'direct' if n <= DIRECT_DFT_MAX_LENGTH else 'bluestein'
    return 'mixed-radix'


def _bluestein_rows(rows: np.ndarray) -> np.ndarray:
    """
    Bluestein (chirp-z) FFT of every row, for prime lengths.

    X_k = w_k * sum_n (x_n * w_n) * conj(w_{k-n}), with w_n = exp(-i*pi*n^2/N).
    The sum is a linear convolution, evaluated with power-of-two FFTs of
    length >= 2N - 1.
    """
    n_rows, n = rows.shape
    m = 1 << (2 * n - 2).bit_length()

    k = np.arange(n)
    # n^2 mod 2N keeps the chirp phase in [0, 2*pi)
    chirp = np.exp(-1j * np.pi * ((k * k) % (2 * n)) / n)

    a = np.zeros((n_rows, m), dtype=np.complex128)
    a[:, :n] = rows * chirp

    b = np.zeros(m, dtype=np.complex128)
    b[:n] = np.conj(chirp)
    b[m - n + 1:] = np.conj(chirp[1:])[::-1]

    fa = _fft_radix2_rows(a)
    fb = _fft_radix2_iter(b)

    # Inverse FFT of the product via the conjugate trick
    conv = np.conj(_fft_radix2_rows(np.conj(fa * fb))) / m

    return conv[:, :n] * chirp


def _mixed_radix_rows(rows: np.ndarray, p: int) -> np.ndarray:
    """
    One decimation-in-time Cooley-Tukey level with radix p.

    For N = p * m and k = q + m * s:
        X[q + m*s] = sum_r W_p^(r*s) * W_N^(r*q) * F_r[q]
    where F_r is the length-m FFT of x[r::p].
    """
    n_rows, n = rows.shape
    m = n // p

    # Row (b, r) of the batch holds x_b[r::p]
    sub = rows.reshape(n_rows, m, p).transpose(0, 2, 1).reshape(n_rows * p, m)
    F = _fft_rows(np.ascontiguousarray(sub)).reshape(n_rows, p, m)

    r = np.arange(p)[:, np.newaxis]
    q = np.arange(m)[np.newaxis, :]
    twiddles = np.exp(-2j * np.pi * (r * q) / n)
    T = F * twiddles

    if p > DIRECT_DFT_MAX_LENGTH:
        # Large prime radix: length-p transforms over r as a batch of rows
        cols = np.ascontiguousarray(T.transpose(0, 2, 1)).reshape(n_rows * m, p)
        X = _fft_rows(cols).reshape(n_rows, m, p).transpose(0, 2, 1)
        return np.ascontiguousarray(X).reshape(n_rows, n)

    s = np.arange(p)
    dft_p = np.exp(-2j * np.pi * ((s[:, np.newaxis] * s[np.newaxis, :]) % p) / p)

    X = np.einsum('sr,brq->bsq', dft_p, T)
    return X.reshape(n_rows, n)


def _fft_rows(rows: np.ndarray) -> np.ndarray:
    """Core FFT over the last axis of a C-contiguous complex128 2-D array."""
    n = rows.shape[1]

    if n <= 1:
        return rows.copy()
    if _is_power_of_two(n):
        return _fft_radix2_rows(rows)

    p = _smallest_odd_factor(n)
    if p == n:
        if n <= DIRECT_DFT_MAX_LENGTH:
            return _dft_naive_rows(rows)
        return _bluestein_rows(rows)
    return _mixed_radix_rows(rows, p)


def _check_norm(norm: str) -> None:
    if norm not in _NORM_MODES:
        raise InvalidArgumentError(
            f"Invalid norm value {norm!r}; should be one of {', '.join(_NORM_MODES)}"
        )


def fft(x, n: Optional[int] = None, axis: int = -1, norm: str = "backward") -> np.ndarray:
    """
    Compute the 1-D discrete Fourier Transform.

    X_k = sum_{n=0}^{N-1} x_n * exp(-2*pi*i*k*n/N)

    Parameters
    ----------
    x : array_like
        Input array, real or complex. Real samples are treated as complex
        numbers with a zero imaginary part.
    n : int, optional
        Length of the transformed axis. If None, uses the length of x.
        Shorter input is zero-padded, longer input is truncated.
    axis : int
        Axis along which to compute the FFT (default: -1)
    norm : str
        Normalization mode: "backward", "ortho", or "forward"

    Returns
    -------
    np.ndarray
        The transformed array. complex64 for float32/complex64 input,
        complex128 otherwise.

    Examples
    --------
    >>> X = fft([1, -1, -1, 1 + 1j])
    >>> # X ~ [1j, 1+2j, -1j, 3-2j]
    """
    _check_norm(norm)
    x = np.asarray(x)
    if x.ndim == 0:
        raise InvalidArgumentError("fft input must be at least 1-D, got a scalar")

    out_dtype = complex_dtype(x)

    if n is None:
        n = x.shape[axis]
    if n < 0:
        raise InvalidArgumentError(f"Invalid number of FFT data points ({n})")

    # Move target axis to the last position
    x = np.moveaxis(as_complex_array(x), axis, -1)

    # Pad or truncate to desired length
    if x.shape[-1] < n:
        pad_width = [(0, 0)] * (x.ndim - 1) + [(0, n - x.shape[-1])]
        x = np.pad(x, pad_width, mode='constant', constant_values=0)
    elif x.shape[-1] > n:
        x = x[..., :n]

    if n == 0:
        return np.moveaxis(np.empty(x.shape, dtype=out_dtype), -1, axis)

    logger.debug("fft: length %d via %s", n, _algorithm_name(n))

    # Flatten leading axes into rows
    original_shape = x.shape
    rows = np.ascontiguousarray(x.reshape(-1, n))
    result = _fft_rows(rows).reshape(original_shape)

    # Apply normalization
    if norm == "ortho":
        result = result / np.sqrt(n)
    elif norm == "forward":
        result = result / n

    result = np.moveaxis(result, -1, axis)
    return result.astype(out_dtype, copy=False)


def ifft(x, n: Optional[int] = None, axis: int = -1, norm: str = "backward") -> np.ndarray:
    """
    Compute the 1-D inverse discrete Fourier Transform.

    x_n = (1/N) * sum_{k=0}^{N-1} X_k * exp(+2*pi*i*k*n/N)

    Implemented as IFFT(x) = conj(FFT(conj(x))) / N, so it shares every
    algorithm path and argument rule with fft.
    """
    _check_norm(norm)
    x = np.asarray(x)
    x_conj = np.conj(x)

    if norm == "backward":
        result = fft(x_conj, n=n, axis=axis, norm="forward")
    elif norm == "forward":
        result = fft(x_conj, n=n, axis=axis, norm="backward")
    else:
        result = fft(x_conj, n=n, axis=axis, norm="ortho")

    return np.conj(result)


def dft(x) -> np.ndarray:
    """
    Direct O(N^2) DFT of a 1-D sequence.

    Reference implementation used to cross-check the fast paths; same
    result contract as ``fft(x)``.
    """
    x = as_sequence(x)
    out_dtype = complex_dtype(x)
    if len(x) == 0:
        return np.empty(0, dtype=out_dtype)
    return _dft_naive_jit(as_complex_array(x)).astype(out_dtype, copy=False)


def fftshift(x) -> np.ndarray:
    """
    Move the zero-frequency bin to the centre of the sequence.

    Right-rotates by floor(N/2): the element at index ceil(N/2) becomes
    index 0. Values and dtype are unchanged.
    """
    x = as_sequence(x)
    if len(x) == 0:
        return x.copy()
    return np.roll(x, len(x) // 2)


def ifftshift(x) -> np.ndarray:
    """
    Inverse of fftshift.

    Left-rotates by floor(N/2). Differs from fftshift only for odd N.
    """
    x = as_sequence(x)
    if len(x) == 0:
        return x.copy()
    return np.roll(x, -(len(x) // 2))
