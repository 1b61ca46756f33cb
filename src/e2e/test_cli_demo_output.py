import json
import pytest
from frontend.__main__ import main


@pytest.mark.e2e
def test_cli_aho_corasick_table(capsys):
    assert main(["--demo", "aho-corasick"]) == 0
    out = capsys.readouterr().out
    assert "Pattern   Start  End" in out
    assert "ATCG      0      3" in out
    assert "TCG       5      7" in out


@pytest.mark.e2e
def test_cli_trie_verdicts(capsys):
    assert main(["--demo", "trie", "--sequences", "ATCG", "ATCGA", "--query", "ATC"]) == 0
    out = capsys.readouterr().out
    assert "ATC: prefix only" in out
    assert "sequences: 2" in out

    assert main(["--demo", "trie", "--sequences", "ATCG", "--query", "GG"]) == 0
    assert "GG: not found" in capsys.readouterr().out


@pytest.mark.e2e
def test_cli_json_output(capsys):
    assert main(["--demo", "slide-multiply", "--text", "ATCGATCG", "--pattern", "TCG", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["scores"] == [0, 3, 0, 0, 0, 3]
    assert data["matches"] == [1, 5]


@pytest.mark.e2e
def test_cli_fft_step(capsys):
    assert main(["--demo", "fft", "--step", "6"]) == 0
    out = capsys.readouterr().out
    assert "perfect matches: 1, 5" in out
    assert "[step 6] Final Results" in out


@pytest.mark.e2e
def test_cli_bad_step_exits_with_error(capsys):
    assert main(["--demo", "fft", "--step", "9"]) == 2
    assert capsys.readouterr().err.startswith("error:")


@pytest.mark.e2e
def test_cli_repl_steps_automaton(monkeypatch, capsys):
    answers = iter(["", "", "", "", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--demo", "aho-corasick", "--repl", "--text", "ATCGA", "--patterns", "TCG", "ATCG"]) == 0
    out = capsys.readouterr().out
    assert "Step 4: 'G' root-A-T-C -> root-A-T-C-G | found: ATCG, TCG" in out
    assert "Matches: 2" in out


@pytest.mark.e2e
def test_cli_repl_requires_aho_corasick():
    with pytest.raises(SystemExit):
        main(["--demo", "trie", "--repl"])


@pytest.mark.e2e
def test_cli_no_caps_keeps_long_input(capsys):
    text = "ATCG" * 8
    assert main(["--demo", "fft", "--text", text, "--pattern", "ATCGATCG", "--no-caps", "--step", "0", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["text"] == text and data["pattern"] == "ATCGATCG"
    assert data["perfect_matches"] == [0, 4, 8, 12, 16, 20, 24]

    assert main(["--demo", "fft", "--text", text, "--pattern", "ATCGATCG", "--step", "0", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data["text"]) == 12 and len(data["pattern"]) == 6
