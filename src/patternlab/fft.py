"""
Radix-2 Cooley-Tukey FFT and its inverse.

Values are Python ``complex`` numbers (real inputs are promoted). Every
signal handed to fft()/ifft() must already have a power-of-two length;
callers zero-pad with pad().
"""

from __future__ import annotations
import math
from typing import List, Sequence, Union

Number = Union[int, float, complex]


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def next_power_of_two(n: int, minimum: int = 1) -> int:
    """Smallest power of two >= max(n, minimum)."""
    n = max(n, minimum, 1)
    return 1 << (n - 1).bit_length()


def pad(signal: Sequence[Number], length: int) -> List[Number]:
    """Right-pad with zeros up to ``length``."""
    if length < len(signal):
        raise ValueError(f"cannot pad a signal of length {len(signal)} down to {length}")
    return list(signal) + [0] * (length - len(signal))


def _fft(x: List[complex]) -> List[complex]:
    n = len(x)
    if n <= 1:
        return x
    even = _fft(x[0::2])
    odd = _fft(x[1::2])
    half = n // 2
    out: List[complex] = [0j] * n
    for k in range(half):
        angle = -2 * math.pi * k / n
        w = complex(math.cos(angle), math.sin(angle))
        t = w * odd[k]
        out[k] = even[k] + t
        out[k + half] = even[k] - t
    return out


def fft(signal: Sequence[Number]) -> List[complex]:
    """Forward DFT; raises ValueError unless len(signal) is a power of two (or 0)."""
    n = len(signal)
    if n > 1 and not is_power_of_two(n):
        raise ValueError(f"fft() needs a power-of-two length, got {n}")
    return _fft([complex(v) for v in signal])


def ifft(spectrum: Sequence[Number]) -> List[complex]:
    """Inverse DFT by conjugation: conj(fft(conj(X))) / N."""
    n = len(spectrum)
    if n == 0:
        return []
    forward = fft([complex(v).conjugate() for v in spectrum])
    return [z.conjugate() / n for z in forward]


def format_complex(z: complex) -> str:
    """One decimal; a part smaller than 0.1 in magnitude is dropped."""
    if abs(z.imag) < 0.1:
        return f"{z.real:.1f}"
    if abs(z.real) < 0.1:
        return f"{z.imag:.1f}i"
    sign = "+" if z.imag >= 0 else ""
    return f"{z.real:.1f}{sign}{z.imag:.1f}i"


def as_pairs(values: Sequence[complex]) -> List[List[float]]:
    """[[real, imag], ...] for JSON output."""
    return [[z.real, z.imag] for z in values]
