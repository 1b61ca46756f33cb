# src/patternlab/models.py
"""
Data models for the pattern-matching engines.

This module defines the small data containers shared by the engines:

- TrieNode / AutomatonNode: one prefix state of a trie or automaton.
- Match: one pattern occurrence reported by the automaton.
- TrieSearchResult, StepEvent: what a trie walk or one automaton step produced.
- ClassDotProduct, WindowStep: one alignment of the sliding-window matcher.
- CorrelationResult: every artifact of the FFT correlation pipeline.
- Layout: node coordinates for rendering.

These classes do not contain matching logic; they only structure the data so
the engines stay simple and every result can be handed to a caller as JSON
through ``to_dict()``.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Tuple


@dataclass(eq=False)
class TrieNode:
    """
    One alphabet-prefix state.

    Attributes
    ----------
    id : str
        Stable identifier: ``"root"`` for the root, ``"<parent id>-<symbol>"``
        for every other node.
    symbol : str
        Symbol on the edge from the parent ("" for the root).
    depth : int
        Distance from the root (root depth = 0).
    children : Dict[str, TrieNode]
        Symbol -> child. At most one entry per alphabet symbol.
    is_terminal : bool
        True iff the prefix ending here is a complete inserted sequence.
        Never true for the root.
    pattern_label : Optional[str]
        The inserted sequence, set only when ``is_terminal``.
    """
    id: str
    symbol: str
    depth: int
    children: Dict[str, "TrieNode"] = field(default_factory=dict, repr=False)
    is_terminal: bool = False
    pattern_label: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "symbol": self.symbol,
            "depth": self.depth,
            "is_terminal": self.is_terminal,
            "pattern": self.pattern_label,
            "children": [c.id for c in self.children.values()],
        }


@dataclass(eq=False)
class AutomatonNode(TrieNode):
    """
    A TrieNode extended with Aho-Corasick links.

    Attributes
    ----------
    failure_link : Optional[AutomatonNode]
        Node of the longest proper suffix of this prefix that is also a prefix
        of some pattern (the root if none). ``None`` only for the root.
    output_links : List[AutomatonNode]
        Terminal nodes on this node's failure chain, this node first when it
        is terminal itself: every pattern recognized in this state.
    """
    failure_link: Optional["AutomatonNode"] = field(default=None, repr=False)
    output_links: List["AutomatonNode"] = field(default_factory=list, repr=False)

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["failure_link"] = self.failure_link.id if self.failure_link is not None else None
        d["output_links"] = [n.id for n in self.output_links]
        return d


@dataclass(frozen=True, slots=True)
class Match:
    """
    One occurrence of a pattern in the scanned text.

    ``start`` and ``end`` are inclusive positions in the raw text, so
    ``end - start + 1 == len(pattern)``.
    """
    pattern: str
    start: int
    end: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TrieSearchResult:
    """
    Outcome of walking a query through a trie.

    Attributes
    ----------
    found : bool
        The full query resolves to a terminal node.
    is_prefix_only : bool
        The walk completed on a non-terminal node that still has children.
    path : List[TrieNode]
        Root first; truncated at the first missing transition.
    """
    found: bool
    is_prefix_only: bool
    path: List[TrieNode]

    def to_dict(self) -> dict:
        return {
            "found": self.found,
            "is_prefix_only": self.is_prefix_only,
            "path": [n.id for n in self.path],
        }


@dataclass(frozen=True)
class StepEvent:
    """What one call to process_character did to the cursor."""
    char: str
    position: int
    previous_state: str
    state: str
    used_failure_link: bool
    failure_hops: Tuple[str, ...]
    matches: Tuple[Match, ...]

    def to_dict(self) -> dict:
        return {
            "char": self.char,
            "position": self.position,
            "previous_state": self.previous_state,
            "state": self.state,
            "used_failure_link": self.used_failure_link,
            "failure_hops": list(self.failure_hops),
            "matches": [m.to_dict() for m in self.matches],
        }


@dataclass(frozen=True)
class ClassDotProduct:
    text_values: List[int]
    pattern_values: List[int]
    products: List[int]
    sum: int


@dataclass(frozen=True)
class WindowStep:
    """
    One alignment of the pattern against the text.

    ``dot_products`` holds one ClassDotProduct per alphabet symbol;
    ``total_score`` is their sum and equals len(pattern) on an exact match.
    """
    position: int
    text_slice: str
    pattern: str
    dot_products: Dict[str, ClassDotProduct]
    total_score: int
    is_match: bool

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CorrelationResult:
    """
    Every artifact of the FFT correlation pipeline.

    Attributes
    ----------
    text, pattern : str
        The cleaned inputs.
    padded_length : int
        Working transform length N (a power of two, at least MIN_FFT_LENGTH).
    text_signals, pattern_signals : Dict[str, List[int]]
        Zero-padded indicator signals per base, each of length N.
    text_spectra, pattern_spectra : Dict[str, List[complex]]
        Forward transforms of the signals.
    multiplied : Dict[str, List[complex]]
        ``text_spectra[b][k] * conj(pattern_spectra[b][k])``.
    inverse : Dict[str, List[complex]]
        Inverse transforms of ``multiplied`` before rounding.
    per_class : Dict[str, List[int]]
        Rounded real parts, trimmed to the valid alignment positions.
    total : List[int]
        Sum of ``per_class`` across bases, one entry per alignment position.
    """
    text: str
    pattern: str
    padded_length: int
    text_signals: Dict[str, List[int]] = field(default_factory=dict)
    pattern_signals: Dict[str, List[int]] = field(default_factory=dict)
    text_spectra: Dict[str, List[complex]] = field(default_factory=dict)
    pattern_spectra: Dict[str, List[complex]] = field(default_factory=dict)
    multiplied: Dict[str, List[complex]] = field(default_factory=dict)
    inverse: Dict[str, List[complex]] = field(default_factory=dict)
    per_class: Dict[str, List[int]] = field(default_factory=dict)
    total: List[int] = field(default_factory=list)

    def perfect_matches(self) -> List[int]:
        """Alignment positions where every pattern symbol agrees."""
        m = len(self.pattern)
        return [i for i, s in enumerate(self.total) if m and s == m]

    def mismatches(self) -> List[int]:
        m = len(self.pattern)
        return [m - s for s in self.total]


@dataclass(frozen=True)
class Layout:
    """Canvas size plus node id -> (x, y) centre."""
    width: float
    height: float
    positions: Dict[str, Tuple[float, float]]

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "positions": {k: [x, y] for k, (x, y) in self.positions.items()},
        }
