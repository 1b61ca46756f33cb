from __future__ import annotations
from typing import Dict, Iterable, List

from .config import ALPHABET
from .normalize import clean


def indicator(seq: str, base: str, length: int | None = None) -> List[int]:
    """
    Binary signal marking where ``base`` occurs in ``seq``.
    Zero-padded on the right up to ``length`` when given.
    """
    sig = [1 if ch == base else 0 for ch in seq]
    if length is not None:
        if length < len(sig):
            raise ValueError(f"signal length {length} shorter than sequence ({len(sig)})")
        sig.extend([0] * (length - len(sig)))
    return sig


def encode(seq: str, length: int | None = None, alphabet: Iterable[str] = ALPHABET) -> Dict[str, List[int]]:
    """One indicator signal per alphabet symbol, in alphabet order."""
    return {b: indicator(seq, b, length) for b in alphabet}


def signal_for(sequence: str, base: str = "G") -> List[int]:
    """Single-base signal of a raw (uncleaned) sequence."""
    return indicator(clean(sequence), base.upper())
