"""Public API for the demo front ends (CLI and Flask share one engine)."""
from __future__ import annotations
import logging
from patternlab.automaton import AhoCorasick, SearchSession
from patternlab.engine import DemoEngine

log = logging.getLogger(__name__)

_engine: DemoEngine | None = None


def initialize(apply_caps: bool = True, catalogue: dict | None = None) -> DemoEngine:
    """Create the process-wide DemoEngine used by run()."""
    global _engine
    _engine = DemoEngine(catalogue, apply_caps=apply_caps)
    return _engine


def run(demo_id: str, **props) -> dict:
    """Run one demo directive and return its JSON-ready trace."""
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.run(demo_id, **props)


def step_session(text: str, patterns: list[str]) -> SearchSession:
    """Fresh automaton over ``patterns`` with a session bound to ``text``."""
    ac = AhoCorasick()
    rejected = [p for p in patterns if not ac.add_pattern(p)]
    if rejected:
        log.warning("Ignored invalid or duplicate patterns: %s", ", ".join(rejected))
    ac.build_failure_links()
    return ac.session(text)
