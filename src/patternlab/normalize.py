from __future__ import annotations
from typing import Iterable, List

from .config import ALPHABET
from .errors import InvalidSequenceError

_SYMBOLS = frozenset(ALPHABET)


def normalize(text: str) -> str:
    """Trim and upper-case. Symbols are not checked."""
    return text.strip().upper()


def is_valid_sequence(seq: str, alphabet: Iterable[str] = ALPHABET) -> bool:
    """True iff ``seq`` is non-empty and every symbol is in ``alphabet`` (compare after normalize())."""
    symbols = set(alphabet)
    return bool(seq) and all(ch in symbols for ch in seq)


def require_sequence(text: str) -> str:
    """Strict entry: normalized sequence or InvalidSequenceError."""
    seq = normalize(text)
    if not seq:
        raise InvalidSequenceError("empty sequence")
    bad = sorted({ch for ch in seq if ch not in _SYMBOLS})
    if bad:
        raise InvalidSequenceError(f"symbols outside {''.join(ALPHABET)}: {''.join(bad)}")
    return seq


def clean_and_map(text: str) -> tuple[str, List[int]]:
    """
    Strip everything outside the alphabet (case-insensitive) and return:
      - the cleaned, upper-cased sequence
      - mapping list: cleaned index -> index in the ORIGINAL string
    """
    out: list[str] = []
    mapping: List[int] = []
    for i, ch in enumerate(text):
        up = ch.upper()
        if up in _SYMBOLS:
            out.append(up)
            mapping.append(i)
    return "".join(out), mapping


def clean(text: str, cap: int | None = None) -> str:
    """Convenience: cleaned sequence only, optionally truncated to ``cap`` symbols."""
    seq = clean_and_map(text)[0]
    return seq[:cap] if cap is not None else seq
