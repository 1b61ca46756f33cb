import pytest
from patternlab.trie import Trie


@pytest.mark.parametrize("seq", ["A", "ATCG", "GGGG", "CATTAG", "atgc", "  TTA  "])
def test_inserted_sequence_is_found(seq):
    trie = Trie()
    assert trie.insert(seq) is True
    assert trie.search(seq).found is True
    assert seq in trie


def test_prefix_is_distinguished_from_missing():
    trie = Trie()
    trie.insert("ATCG")
    trie.insert("ATCGAT")
    res = trie.search("ATCGA")
    assert res.found is False
    assert res.is_prefix_only is True
    assert [n.id for n in res.path][-1] == "root-A-T-C-G-A"


def test_three_nested_sequences_share_one_path():
    trie = Trie()
    assert all(trie.insert(s) for s in ["ATCG", "ATCGA", "ATCGAT"])
    res = trie.search("ATCGAT")
    assert res.found and not res.is_prefix_only
    assert len(res.path) == 7
    assert trie.node_count == 7
    terminals = sorted(n.depth for n in trie.get_all_nodes() if n.is_terminal)
    assert terminals == [4, 5, 6]
    assert trie.pattern_count == 3


def test_missing_transition_truncates_path():
    trie = Trie()
    trie.insert("ATCG")
    res = trie.search("ATGC")
    assert res.found is False and res.is_prefix_only is False
    assert [n.id for n in res.path] == ["root", "root-A", "root-A-T"]


def test_rejected_inserts_do_not_mutate():
    trie = Trie()
    trie.insert("ATCG")
    before = (trie.node_count, trie.pattern_count)
    assert trie.insert("") is False
    assert trie.insert("ATXG") is False
    assert trie.insert("atcg") is False  # duplicate after normalization
    assert (trie.node_count, trie.pattern_count) == before
    assert trie.search("ATX").path[-1].id == "root-A-T"


def test_root_is_never_terminal_and_ids_follow_paths():
    trie = Trie()
    trie.insert("GA")
    trie.insert("GC")
    root = trie.root
    assert root.is_terminal is False and root.depth == 0
    assert sorted(c.id for c in root.children["G"].children.values()) == ["root-G-A", "root-G-C"]
    assert root.children["G"].children["C"].pattern_label == "GC"


def test_clear_resets_to_single_root():
    trie = Trie()
    trie.insert("ATCG")
    trie.clear()
    assert trie.node_count == 1
    assert trie.pattern_count == 0
    assert trie.search("ATCG").found is False


def test_stats_edges_and_sequences():
    trie = Trie()
    for s in ["ATCG", "ATCGA", "ATCGAT"]:
        trie.insert(s)
    assert trie.stats() == {"pattern_count": 3, "stored_nodes": 6, "memory_saving": 67}
    assert len(trie.edges()) == 6
    assert trie.sequences() == ["ATCG", "ATCGA", "ATCGAT"]
    assert Trie().stats()["memory_saving"] == 0


@pytest.mark.parametrize("query", ["", "   ", "\n"])
def test_empty_query_is_neither_found_nor_prefix(query):
    trie = Trie()
    trie.insert("ATCG")
    res = trie.search(query)
    assert res.found is False
    assert res.is_prefix_only is False
    assert [n.id for n in res.path] == ["root"]
