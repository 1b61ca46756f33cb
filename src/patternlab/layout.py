"""
Level-by-level node placement for rendering a trie or an automaton.

Nodes are grouped by depth, each depth becomes one horizontal row.
Coordinates are plain numbers; drawing is the caller's business.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Tuple

from . import config as CFG
from .models import Layout, TrieNode


def _levels(nodes: Iterable[TrieNode]) -> List[List[TrieNode]]:
    levels: List[List[TrieNode]] = []
    for n in nodes:
        while len(levels) <= n.depth:
            levels.append([])
        levels[n.depth].append(n)
    return levels


def trie_layout(nodes: Iterable[TrieNode]) -> Layout:
    """Fixed spacing per node, each row centred."""
    levels = _levels(nodes)
    spacing = CFG.TRIE_NODE_SPACING
    width = max(CFG.TRIE_MIN_WIDTH, max((len(lv) * spacing for lv in levels), default=0))
    height = max(CFG.TRIE_MIN_HEIGHT, len(levels) * CFG.TRIE_LEVEL_HEIGHT)

    positions: Dict[str, Tuple[float, float]] = {}
    for depth, row in enumerate(levels):
        y = CFG.TRIE_TOP + depth * CFG.TRIE_LEVEL_HEIGHT
        start_x = max(60, (width - len(row) * spacing) / 2)
        for i, n in enumerate(row):
            positions[n.id] = (start_x + i * spacing, y)
    return Layout(width=width, height=height, positions=positions)


def automaton_layout(nodes: Iterable[TrieNode]) -> Layout:
    """Rows spread evenly across the canvas; a lone node is centred."""
    levels = _levels(nodes)
    width = max(CFG.AC_MIN_WIDTH, max((len(lv) * CFG.AC_NODE_SPACING for lv in levels), default=0))
    height = max(CFG.AC_MIN_HEIGHT, len(levels) * CFG.AC_LEVEL_HEIGHT)
    usable = width - CFG.AC_SIDE_MARGIN
    start_x = max(80, (width - usable) / 2)

    positions: Dict[str, Tuple[float, float]] = {}
    for depth, row in enumerate(levels):
        y = CFG.AC_TOP + depth * CFG.AC_LEVEL_HEIGHT
        if len(row) == 1:
            positions[row[0].id] = (width / 2, y)
            continue
        spacing = usable / (len(row) + 1)
        for i, n in enumerate(row):
            positions[n.id] = (start_x + spacing * (i + 1), y)
    return Layout(width=width, height=height, positions=positions)
