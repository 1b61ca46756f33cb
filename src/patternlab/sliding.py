"""
Sliding-window dot-product matcher.

Text and pattern are reduced to per-base indicator vectors; at every
alignment the four per-base dot products are summed. The score counts the
agreeing positions, so ``score == len(pattern)`` marks an exact match.
O(N x M x |alphabet|): this is the reference the FFT pipeline is checked
against, not a fast path.
"""

from __future__ import annotations
from typing import Dict, List

from .config import ALPHABET
from .models import ClassDotProduct, WindowStep
from .normalize import clean
from .signals import encode


def _dot(a: List[int], b: List[int]) -> int:
    return sum(x * y for x, y in zip(a, b))


def compute_scores(text: str, pattern: str) -> List[int]:
    """
    One score per alignment 0 .. len(text)-len(pattern).

    Foreign symbols are stripped from both inputs first. An empty pattern or
    a pattern longer than the text gives [].
    """
    t, p = clean(text), clean(pattern)
    n, m = len(t), len(p)
    if m == 0 or m > n:
        return []
    t_sig = encode(t)
    p_sig = encode(p)
    return [
        sum(_dot(t_sig[b][i:i + m], p_sig[b]) for b in ALPHABET)
        for i in range(n - m + 1)
    ]


def window_steps(text: str, pattern: str) -> List[WindowStep]:
    """Same computation as compute_scores(), keeping every intermediate vector."""
    t, p = clean(text), clean(pattern)
    n, m = len(t), len(p)
    if m == 0 or m > n:
        return []
    p_sig = encode(p)
    steps: List[WindowStep] = []
    for i in range(n - m + 1):
        window = t[i:i + m]
        w_sig = encode(window)
        per_base: Dict[str, ClassDotProduct] = {}
        for b in ALPHABET:
            products = [x * y for x, y in zip(w_sig[b], p_sig[b])]
            per_base[b] = ClassDotProduct(
                text_values=w_sig[b],
                pattern_values=p_sig[b],
                products=products,
                sum=sum(products),
            )
        total = sum(d.sum for d in per_base.values())
        steps.append(WindowStep(
            position=i,
            text_slice=window,
            pattern=p,
            dot_products=per_base,
            total_score=total,
            is_match=total == m,
        ))
    return steps
