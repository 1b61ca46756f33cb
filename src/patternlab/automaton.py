from __future__ import annotations
import logging
from collections import deque
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import ALPHABET
from .errors import StaleAutomatonError
from .models import AutomatonNode, Match, StepEvent
from .normalize import normalize, is_valid_sequence

log = logging.getLogger(__name__)


class AhoCorasick:
    """
    Aho-Corasick automaton over a fixed sequence alphabet.

    Static structure (trie + failure/output links) lives here; per-search
    cursor state lives in SearchSession so several searches can share one
    automaton.

    Lifecycle:
      * add_pattern(p)          insert into the trie (links become stale)
      * build_failure_links()   breadth-first link construction
      * search(text) / session()
    A search or new session on a stale automaton rebuilds the links first.
    A session opened before the pattern set changed refuses to continue
    (StaleAutomatonError).
    """

    def __init__(self, alphabet: Iterable[str] = ALPHABET) -> None:
        self.alphabet: Tuple[str, ...] = tuple(alphabet)
        self.root = AutomatonNode(id="root", symbol="", depth=0)
        self.patterns: List[str] = []
        self._generation = 0          # bumped on every change to the pattern set
        self._built_generation = -1   # generation the links were built for
        self._cursor: Optional[SearchSession] = None

    # ------------- construction -------------

    def add_pattern(self, pattern: str) -> bool:
        """Insert a pattern; False for empty, foreign-symbol or duplicate input."""
        seq = normalize(pattern)
        if not is_valid_sequence(seq, self.alphabet) or seq in self.patterns:
            return False
        node = self.root
        for ch in seq:
            child = node.children.get(ch)
            if child is None:
                child = AutomatonNode(id=f"{node.id}-{ch}", symbol=ch, depth=node.depth + 1)
                node.children[ch] = child
            node = child  # type: ignore[assignment]
        node.is_terminal = True
        node.pattern_label = seq
        self.patterns.append(seq)
        self._generation += 1
        return True

    def build_failure_links(self) -> None:
        """
        Two breadth-first passes: every failure link first, then every
        output-link list (each one walks its node's own failure chain).
        """
        order: List[AutomatonNode] = []
        queue = deque([self.root])
        self.root.failure_link = None
        while queue:
            parent = queue.popleft()
            for ch, child in parent.children.items():
                f = parent.failure_link
                while f is not None and ch not in f.children:
                    f = f.failure_link
                child.failure_link = f.children[ch] if f is not None else self.root  # type: ignore[assignment]
                order.append(child)  # type: ignore[arg-type]
                queue.append(child)

        self.root.output_links = []
        for node in order:
            outputs = [node] if node.is_terminal else []
            f = node.failure_link
            while f is not None and f is not self.root:
                if f.is_terminal:
                    outputs.append(f)
                f = f.failure_link
            node.output_links = outputs

        self._built_generation = self._generation
        log.info("automaton built: patterns=%d nodes=%d", len(self.patterns), len(order) + 1)

    @property
    def is_stale(self) -> bool:
        return self._built_generation != self._generation

    def _ensure_built(self) -> None:
        if self.is_stale:
            log.info("pattern set changed since last build; rebuilding failure links")
            self.build_failure_links()

    # ------------- search -------------

    def session(self, text: Optional[str] = None) -> "SearchSession":
        """New cursor at the root, optionally bound to ``text`` for step()/run()."""
        self._ensure_built()
        return SearchSession(self, text)

    def search(self, text: str) -> List[Match]:
        """Scan the whole text from the root; overlapping occurrences included."""
        self._cursor = self.session(text)
        return self._cursor.run()

    def process_character(self, char: str, position: int) -> StepEvent:
        """
        Stepwise mode on the automaton's own cursor. The cursor's position
        moves past ``position``, so a later cursor.step() resumes after it.
        """
        if self._cursor is None:
            self._cursor = self.session()
        event = self._cursor.process_character(char, position)
        self._cursor.position = position + 1
        return event

    @property
    def cursor(self) -> Optional["SearchSession"]:
        return self._cursor

    def clear_highlights(self) -> None:
        """Drop the automaton's own cursor; the next step starts from the root."""
        self._cursor = None

    def clear(self) -> None:
        self.root = AutomatonNode(id="root", symbol="", depth=0)
        self.patterns = []
        self._generation += 1
        self._built_generation = -1
        self._cursor = None

    # ------------- rendering helpers -------------

    def iter_nodes(self) -> Iterator[AutomatonNode]:
        stack = [self.root]
        while stack:
            n = stack.pop()
            yield n
            stack.extend(reversed(list(n.children.values())))  # type: ignore[arg-type]

    def get_all_nodes(self) -> List[AutomatonNode]:
        return list(self.iter_nodes())

    def edges(self) -> List[Tuple[str, str, str]]:
        """(from, to, kind) with kind 'trie' or 'failure'; failure links to the root are left out."""
        out: List[Tuple[str, str, str]] = []
        for n in self.iter_nodes():
            for c in n.children.values():
                out.append((n.id, c.id, "trie"))
            if n.failure_link is not None and n.failure_link is not self.root:
                out.append((n.id, n.failure_link.id, "failure"))
        return out


class SearchSession:
    """
    Mutable search state over one automaton: current node, next input
    position, accumulated matches and the per-character event log.
    """

    def __init__(self, automaton: AhoCorasick, text: Optional[str] = None) -> None:
        self._ac = automaton
        self._generation = automaton._generation
        self.text = text
        self.state: AutomatonNode = automaton.root
        self.position = 0
        self.matches: List[Match] = []
        self.events: List[StepEvent] = []

    def reset(self, text: Optional[str] = None) -> None:
        if text is not None:
            self.text = text
        self.state = self._ac.root
        self.position = 0
        self.matches = []
        self.events = []

    def process_character(self, char: str, position: int) -> StepEvent:
        if len(char) != 1:
            raise ValueError(f"process_character() expects one character, got {char!r}")
        if self._generation != self._ac._generation:
            raise StaleAutomatonError("pattern set changed after this session started")

        ch = char.upper()
        root = self._ac.root
        previous = self.state
        node = previous
        hops: List[str] = []
        while node is not root and ch not in node.children:
            node = node.failure_link  # type: ignore[assignment]
            hops.append(node.id)
        nxt = node.children.get(ch)
        self.state = nxt if nxt is not None else root  # type: ignore[assignment]

        found = tuple(
            Match(pattern=out.pattern_label, start=position - len(out.pattern_label) + 1, end=position)  # type: ignore[arg-type]
            for out in self.state.output_links
        )
        self.matches.extend(found)
        event = StepEvent(
            char=ch,
            position=position,
            previous_state=previous.id,
            state=self.state.id,
            used_failure_link=bool(hops),
            failure_hops=tuple(hops),
            matches=found,
        )
        self.events.append(event)
        if hops:
            log.debug("pos=%d %r: failure hops %s", position, ch, " -> ".join(hops))
        return event

    @property
    def done(self) -> bool:
        return self.text is None or self.position >= len(self.text)

    def step(self) -> Optional[StepEvent]:
        """Process the next character of the bound text; None once exhausted."""
        if self.done:
            return None
        event = self.process_character(self.text[self.position], self.position)  # type: ignore[index]
        self.position += 1
        return event

    def run(self) -> List[Match]:
        while not self.done:
            self.step()
        return list(self.matches)
