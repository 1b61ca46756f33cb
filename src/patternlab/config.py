from __future__ import annotations

# /* ~~~ sequence alphabet (display order) ~~~ */
ALPHABET: tuple[str, ...] = ("A", "T", "G", "C")

# Naive storage estimate used by the trie stats (symbols per sequence)
NAIVE_SYMBOLS_PER_SEQUENCE: int = 6

# FFT working length never drops below this
MIN_FFT_LENGTH: int = 8

# Inverse-transform outputs further than this from an integer are logged
ROUND_TOLERANCE: float = 1e-6

# Demo input caps (applied by the engine facade, not by the algorithms)
SLIDE_TEXT_CAP: int = 20
SLIDE_PATTERN_CAP: int = 10
FFT_TEXT_CAP: int = 12
FFT_PATTERN_CAP: int = 6

# FFT walkthrough steps, addressable by index 0..6
FFT_STEPS: tuple[str, ...] = (
    "input", "signals", "text-fft", "pattern-fft", "multiply", "ifft", "results",
)
FFT_STEP_NAMES: tuple[str, ...] = (
    "Input Processing", "Binary Signals", "Text FFT", "Pattern FFT",
    "Frequency Multiplication", "Inverse FFT", "Final Results",
)

# Layout geometry: trie demo
TRIE_MIN_WIDTH: int = 800
TRIE_MIN_HEIGHT: int = 400
TRIE_NODE_SPACING: int = 120
TRIE_LEVEL_HEIGHT: int = 80
TRIE_TOP: int = 50

# Layout geometry: automaton demo
AC_MIN_WIDTH: int = 900
AC_MIN_HEIGHT: int = 500
AC_NODE_SPACING: int = 140
AC_LEVEL_HEIGHT: int = 90
AC_TOP: int = 60
AC_SIDE_MARGIN: int = 120

DEMO_CATEGORIES: dict[str, str] = {
    "pattern-matching": "Pattern Matching",
    "data-structures": "Data Structures",
    "signal-processing": "Signal Processing",
    "string-algorithms": "String Algorithms",
}

# /* ~~~ demo catalogue: id -> metadata + default props ~~~ */
DEMOS: dict[str, dict] = {
    "slide-multiply": {
        "name": "Sliding Window Pattern Matching",
        "description": "Sliding window pattern matching with character encoding",
        "category": "pattern-matching",
        "defaults": {"text": "ATCGATCG", "pattern": "TCG"},
    },
    "trie": {
        "name": "Trie Data Structure",
        "description": "Trie storage and search over DNA sequences",
        "category": "data-structures",
        "defaults": {"sequences": ["ATCG", "ATCGA", "ATCGAT"], "query": "ATCGAT"},
    },
    "aho-corasick": {
        "name": "Aho-Corasick Automaton",
        "description": "Multi-pattern string matching with failure links",
        "category": "string-algorithms",
        "defaults": {"text": "ATCGATCG", "patterns": ["TCG", "ATCG"]},
    },
    "signal": {
        "name": "Signal Processing Visualization",
        "description": "Convert DNA sequences to binary signals",
        "category": "signal-processing",
        "defaults": {"sequence": "AGGCGTA", "base": "G"},
    },
    "fft": {
        "name": "FFT Pattern Matching",
        "description": "FFT-based cross-correlation over per-base signals",
        "category": "signal-processing",
        "defaults": {"text": "ATCGATCGATCG", "pattern": "TCGA"},
    },
}
