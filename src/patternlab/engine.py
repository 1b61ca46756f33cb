# patternlab/engine.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from . import config as CFG
from .automaton import AhoCorasick
from .correlation import correlate, step as fft_step, steps as fft_steps
from .errors import InvalidSequenceError, UnknownDemoError
from .layout import automaton_layout, trie_layout
from .normalize import clean, clean_and_map, normalize, require_sequence
from .signals import signal_for
from .sliding import compute_scores, window_steps
from .trie import Trie

log = logging.getLogger(__name__)


class DemoEngine:
    """
    Thin orchestration layer between a demo directive and the engines:
      - looks the demo id up in an injected catalogue (defaults to CFG.DEMOS),
      - merges the directive's props over the catalogue defaults,
      - runs the matching engine and returns a JSON-ready trace.

    Public API (used by CLI/Flask):
      * demos():            catalogue entries
      * categories():       demo counts per category
      * run(demo_id, **props)
    Every run builds fresh engine instances, so one DemoEngine can serve
    concurrent requests.
    """

    # ------------- lifecycle -------------

    def __init__(self, catalogue: Optional[Mapping[str, dict]] = None, *, apply_caps: bool = True) -> None:
        self.catalogue: Mapping[str, dict] = catalogue if catalogue is not None else CFG.DEMOS
        self.apply_caps = apply_caps
        self._runners: Dict[str, Callable[..., dict]] = {
            "trie": self._run_trie,
            "aho-corasick": self._run_aho_corasick,
            "slide-multiply": self._run_slide_multiply,
            "signal": self._run_signal,
            "fft": self._run_fft,
        }
        log.info("DemoEngine ready: demos=%s", ", ".join(self.catalogue))

    # ------------- catalogue -------------

    def demos(self) -> List[dict]:
        return [{"id": demo_id, **meta} for demo_id, meta in self.catalogue.items()]

    def categories(self) -> List[dict]:
        counts: Dict[str, int] = {}
        for meta in self.catalogue.values():
            counts[meta["category"]] = counts.get(meta["category"], 0) + 1
        return [
            {"category": cat, "name": name, "count": counts.get(cat, 0)}
            for cat, name in CFG.DEMO_CATEGORIES.items()
        ]

    def props_for(self, demo_id: str, overrides: Optional[Mapping[str, Any]] = None) -> dict:
        if demo_id not in self.catalogue:
            raise UnknownDemoError(demo_id)
        props = dict(self.catalogue[demo_id].get("defaults", {}))
        props.update({k: v for k, v in (overrides or {}).items() if v is not None})
        return props

    # ------------- run -------------

    def run(self, demo_id: str, **overrides: Any) -> dict:
        props = self.props_for(demo_id, overrides)
        runner = self._runners.get(demo_id)
        if runner is None:
            raise UnknownDemoError(demo_id)
        log.info("Running demo %s with %s", demo_id, props)
        return {"demo": demo_id, **runner(**props)}

    # ------------- internals -------------

    def _cap_for(self, cap: int) -> Optional[int]:
        return cap if self.apply_caps else None

    def _clean_text(self, raw: str, cap: int) -> Tuple[str, List[int]]:
        """Cleaned, capped text plus each kept symbol's offset in ``raw``."""
        seq, offsets = clean_and_map(raw)
        limit = self._cap_for(cap)
        if limit is not None:
            seq, offsets = seq[:limit], offsets[:limit]
        return seq, offsets

    def _run_trie(self, sequences: List[str], query: str = "", **_: Any) -> dict:
        trie = Trie()
        inserted = {normalize(s): trie.insert(s) for s in sequences}
        result = trie.search(query) if query else None
        nodes = trie.get_all_nodes()
        return {
            "inserted": inserted,
            "search": result.to_dict() if result else None,
            "query": normalize(query),
            "nodes": [n.to_dict() for n in nodes],
            "edges": [list(e) for e in trie.edges()],
            "layout": trie_layout(nodes).to_dict(),
            "stats": trie.stats(),
        }

    def _run_aho_corasick(self, text: str, patterns: List[str], **_: Any) -> dict:
        ac = AhoCorasick()
        accepted = {normalize(p): ac.add_pattern(p) for p in patterns}
        ac.build_failure_links()
        session = ac.session(normalize(text))
        matches = session.run()
        nodes = ac.get_all_nodes()
        return {
            "text": session.text,
            "patterns": list(ac.patterns),
            "accepted": accepted,
            "matches": [m.to_dict() for m in matches],
            "steps": [e.to_dict() for e in session.events],
            "nodes": [n.to_dict() for n in nodes],
            "edges": [list(e) for e in ac.edges()],
            "layout": automaton_layout(nodes).to_dict(),
        }

    def _run_slide_multiply(self, text: str, pattern: str, **_: Any) -> dict:
        t, offsets = self._clean_text(text, CFG.SLIDE_TEXT_CAP)
        p = clean(pattern, self._cap_for(CFG.SLIDE_PATTERN_CAP))
        scores = compute_scores(t, p)
        matches = [i for i, s in enumerate(scores) if p and s == len(p)]
        return {
            "text": t,
            "pattern": p,
            "scores": scores,
            "matches": matches,
            "raw_offsets": [offsets[i] for i in matches],
            "steps": [s.to_dict() for s in window_steps(t, p)],
        }

    def _run_signal(self, sequence: str, base: str = "G", **_: Any) -> dict:
        b = require_sequence(base)
        if len(b) != 1:
            raise InvalidSequenceError(f"base must be a single symbol, got {b!r}")
        return {"sequence": clean(sequence), "base": b, "signal": signal_for(sequence, b)}

    def _run_fft(self, text: str, pattern: str, step: Optional[int] = None, **_: Any) -> dict:
        t, offsets = self._clean_text(text, CFG.FFT_TEXT_CAP)
        p = clean(pattern, self._cap_for(CFG.FFT_PATTERN_CAP))
        result = correlate(t, p)
        perfect = result.perfect_matches()
        out = {
            "text": t,
            "pattern": p,
            "padded_length": result.padded_length,
            "per_class": result.per_class,
            "total": result.total,
            "perfect_matches": perfect,
            "raw_offsets": [offsets[i] for i in perfect],
        }
        if step is None:
            out["steps"] = fft_steps(result)
        else:
            out["step"] = fft_step(result, int(step))
        return out
