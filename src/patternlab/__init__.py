"""
Pattern Lab Engine Module

This module provides the algorithm engines behind a set of interactive
DNA pattern-matching demonstrations. Every engine works over the alphabet
{A, T, G, C} and can return either a plain answer or a full trace of its
intermediate state for step-by-step display.

The module is designed with a clean separation of concerns:
- Trie storage and prefix search
- Aho-Corasick multi-pattern matching with a resumable search session
- Sliding-window dot-product scoring (reference implementation)
- Radix-2 FFT/IFFT and the frequency-domain correlation pipeline
- A demo engine that maps demo directives to JSON-ready traces

Example Usage:
    from patternlab import AhoCorasick, compute_scores, correlate

    ac = AhoCorasick()
    for p in ("TCG", "ATCG"):
        ac.add_pattern(p)
    ac.build_failure_links()
    ac.search("ATCGA")   # ATCG at 0..3, then TCG at 1..3

    compute_scores("ATCGATCG", "TCG")       # [0, 3, 0, 0, 0, 3]
    correlate("ATCGATCG", "TCG").total      # same scores, via FFT
"""

# src/patternlab/__init__.py
from .automaton import AhoCorasick, SearchSession
from .correlation import correlate
from .engine import DemoEngine
from .errors import PatternLabError, InvalidSequenceError, StaleAutomatonError, UnknownDemoError
from .fft import fft, ifft
from .models import Match, CorrelationResult
from .sliding import compute_scores, window_steps
from .trie import Trie

__version__ = "1.0.0"
__all__ = [
    "AhoCorasick", "SearchSession", "Trie",
    "compute_scores", "window_steps", "correlate", "fft", "ifft",
    "DemoEngine", "Match", "CorrelationResult",
    "PatternLabError", "InvalidSequenceError", "StaleAutomatonError", "UnknownDemoError",
]
