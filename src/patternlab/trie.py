from __future__ import annotations
import logging
from collections import deque
from typing import Iterable, Iterator, List, Tuple

from .config import ALPHABET, NAIVE_SYMBOLS_PER_SEQUENCE
from .models import TrieNode, TrieSearchResult
from .normalize import normalize, is_valid_sequence

log = logging.getLogger(__name__)


class Trie:
    """
    Prefix tree over a fixed sequence alphabet (A, T, G, C by default).
    insert() rejects empty, foreign-symbol and duplicate sequences by returning False.
    search() reports found / prefix-only plus the walked node path for animation.
    """
    def __init__(self, alphabet: Iterable[str] = ALPHABET) -> None:
        self.alphabet: Tuple[str, ...] = tuple(alphabet)
        self.root = TrieNode(id="root", symbol="", depth=0)
        self.pattern_count = 0

    # -------- Build-time API --------
    def insert(self, sequence: str) -> bool:
        seq = normalize(sequence)
        if not is_valid_sequence(seq, self.alphabet):
            return False
        node = self.root
        for ch in seq:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(id=f"{node.id}-{ch}", symbol=ch, depth=node.depth + 1)
                node.children[ch] = child
            node = child
        if node.is_terminal:
            return False
        node.is_terminal = True
        node.pattern_label = seq
        self.pattern_count += 1
        log.debug("trie insert %s (patterns=%d)", seq, self.pattern_count)
        return True

    def clear(self) -> None:
        self.root = TrieNode(id="root", symbol="", depth=0)
        self.pattern_count = 0

    # -------- Query --------
    def search(self, sequence: str) -> TrieSearchResult:
        """An empty query is neither found nor a prefix; its path is just the root."""
        node = self.root
        path: List[TrieNode] = [node]
        query = normalize(sequence)
        if not query:
            return TrieSearchResult(found=False, is_prefix_only=False, path=path)
        for ch in query:
            node = node.children.get(ch)
            if node is None:
                return TrieSearchResult(found=False, is_prefix_only=False, path=path)
            path.append(node)
        return TrieSearchResult(
            found=node.is_terminal,
            is_prefix_only=not node.is_terminal and bool(node.children),
            path=path,
        )

    def __contains__(self, sequence: str) -> bool:
        return self.search(sequence).found

    # -------- Rendering helpers --------
    def iter_nodes(self) -> Iterator[TrieNode]:
        """Pre-order, root first, children in insertion order."""
        stack = [self.root]
        while stack:
            n = stack.pop()
            yield n
            stack.extend(reversed(list(n.children.values())))

    def get_all_nodes(self) -> List[TrieNode]:
        return list(self.iter_nodes())

    @property
    def node_count(self) -> int:
        """All nodes, root included."""
        return sum(1 for _ in self.iter_nodes())

    def sequences(self) -> List[str]:
        """Stored sequences in breadth-first (shortest first) order."""
        out: List[str] = []
        q = deque([self.root])
        while q:
            n = q.popleft()
            if n.is_terminal:
                out.append(n.pattern_label)  # type: ignore[arg-type]
            q.extend(n.children.values())
        return out

    def edges(self) -> List[Tuple[str, str]]:
        return [(n.id, c.id) for n in self.iter_nodes() for c in n.children.values()]

    def stats(self) -> dict:
        nodes = self.node_count - 1  # root stores no symbol
        naive = self.pattern_count * NAIVE_SYMBOLS_PER_SEQUENCE
        saving = max(0, round((1 - nodes / naive) * 100)) if naive > 0 else 0
        return {"pattern_count": self.pattern_count, "stored_nodes": nodes, "memory_saving": saving}
