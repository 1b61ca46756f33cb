import pytest
from patternlab.config import DEMOS
from patternlab.engine import DemoEngine
from patternlab.errors import InvalidSequenceError, UnknownDemoError


def test_catalogue_and_categories():
    eng = DemoEngine()
    ids = [d["id"] for d in eng.demos()]
    assert sorted(ids) == sorted(DEMOS)
    for d in eng.demos():
        for key in ("name", "description", "category", "defaults"):
            assert key in d
    counts = {c["category"]: c["count"] for c in eng.categories()}
    assert counts == {
        "pattern-matching": 1,
        "data-structures": 1,
        "signal-processing": 2,
        "string-algorithms": 1,
    }


def test_trie_demo_defaults():
    out = DemoEngine().run("trie")
    assert out["demo"] == "trie"
    assert out["inserted"] == {"ATCG": True, "ATCGA": True, "ATCGAT": True}
    assert out["search"]["found"] is True
    assert out["search"]["path"][-1] == "root-A-T-C-G-A-T"
    assert out["stats"] == {"pattern_count": 3, "stored_nodes": 6, "memory_saving": 67}
    assert len(out["nodes"]) == 7 and len(out["edges"]) == 6
    assert set(out["layout"]["positions"]) == {n["id"] for n in out["nodes"]}


def test_aho_corasick_demo_reports_overlapping_matches():
    out = DemoEngine().run("aho-corasick")
    found = [(m["pattern"], m["start"], m["end"]) for m in out["matches"]]
    assert found == [("ATCG", 0, 3), ("TCG", 1, 3), ("ATCG", 4, 7), ("TCG", 5, 7)]
    assert len(out["steps"]) == len(out["text"]) == 8
    assert out["accepted"] == {"TCG": True, "ATCG": True}
    assert ["root-A-T", "root-T", "failure"] in out["edges"]


def test_aho_corasick_demo_rejects_bad_patterns_but_runs():
    out = DemoEngine().run("aho-corasick", text="GGATX", patterns=["GA", "XYZ", ""])
    assert out["accepted"] == {"GA": True, "XYZ": False, "": False}
    assert out["patterns"] == ["GA"]
    assert [(m["pattern"], m["start"]) for m in out["matches"]] == [("GA", 1)]


def test_signal_demo():
    out = DemoEngine().run("signal")
    assert out["signal"] == [0, 1, 1, 0, 1, 0, 0]
    out = DemoEngine().run("signal", sequence="ttaga", base="a")
    assert out == {"demo": "signal", "sequence": "TTAGA", "base": "A", "signal": [0, 0, 1, 0, 1]}


def test_slide_multiply_demo_applies_caps():
    text = "ATCG" * 8
    out = DemoEngine().run("slide-multiply", text=text, pattern="ATCGATCGATCGA")
    assert out["text"] == text[:20] and out["pattern"] == "ATCGATCGAT"
    assert out["matches"] == [0, 4, 8]
    assert len(out["steps"]) == len(out["scores"]) == 11

    uncapped = DemoEngine(apply_caps=False).run("slide-multiply", text=text, pattern="ATCGATCGATCGA")
    assert uncapped["text"] == text and uncapped["pattern"] == "ATCGATCGATCGA"


def test_fft_demo_defaults_and_single_step():
    out = DemoEngine().run("fft")
    assert out["padded_length"] == 16
    assert out["perfect_matches"] == [1, 5]
    assert len(out["steps"]) == 7

    one = DemoEngine().run("fft", step=4)
    assert "steps" not in one
    assert one["step"]["step"] == "multiply"
    assert set(one["step"]["multiplied"]) == {"A", "T", "G", "C"}


def test_fft_demo_caps_inputs():
    out = DemoEngine().run("fft", text="A" * 30, pattern="AAAAAAAA")
    assert len(out["text"]) == 12 and len(out["pattern"]) == 6
    assert out["total"] == [6] * 7
    with pytest.raises(IndexError):
        DemoEngine().run("fft", step=7)


def test_unknown_demo_and_none_overrides():
    eng = DemoEngine()
    with pytest.raises(UnknownDemoError) as ei:
        eng.run("nope")
    assert "nope" in str(ei.value)
    assert eng.run("signal", sequence=None, base=None)["signal"] == [0, 1, 1, 0, 1, 0, 0]


def test_injected_catalogue_is_authoritative():
    catalogue = {
        "trie": {
            "name": "Tiny trie",
            "description": "one sequence",
            "category": "data-structures",
            "defaults": {"sequences": ["GG"], "query": "G"},
        },
        "extra": {"name": "x", "description": "no runner", "category": "data-structures", "defaults": {}},
    }
    eng = DemoEngine(catalogue)
    assert [d["id"] for d in eng.demos()] == ["trie", "extra"]
    out = eng.run("trie")
    assert out["search"]["is_prefix_only"] is True
    with pytest.raises(UnknownDemoError):
        eng.run("fft")
    with pytest.raises(UnknownDemoError):
        eng.run("extra")


def test_match_positions_map_back_to_raw_text():
    eng = DemoEngine()
    slide = eng.run("slide-multiply", text="at-cg atcg", pattern="TCG")
    assert slide["text"] == "ATCGATCG"
    assert slide["matches"] == [1, 5]
    assert slide["raw_offsets"] == [1, 7]

    fft = eng.run("fft", text="at-cg atcg", pattern="t c g", step=6)
    assert fft["perfect_matches"] == [1, 5]
    assert fft["raw_offsets"] == [1, 7]


def test_raw_offsets_follow_the_capped_text():
    out = DemoEngine().run("slide-multiply", text="xx" + "A" * 25, pattern="AAA")
    assert len(out["text"]) == 20
    assert out["raw_offsets"] == list(range(2, 20))


@pytest.mark.parametrize("base", ["GA", "x", " "])
def test_signal_demo_requires_one_alphabet_symbol(base):
    with pytest.raises(InvalidSequenceError):
        DemoEngine().run("signal", sequence="AGGC", base=base)
