from __future__ import annotations
import argparse, sys, json, logging
from patternlab.config import DEMOS
from patternlab.errors import PatternLabError
from patternlab.fft import format_complex
from . import initialize, run, step_session


def _print_summary(out: dict) -> None:
    demo = out["demo"]
    if demo == "trie":
        s = out["stats"]
        print(f"sequences: {s['pattern_count']}  nodes: {s['stored_nodes']}  saving: {s['memory_saving']}%")
        res = out["search"]
        if res is not None:
            verdict = "found" if res["found"] else ("prefix only" if res["is_prefix_only"] else "not found")
            print(f"{out['query']}: {verdict}  path: {' > '.join(res['path'])}")
    elif demo == "aho-corasick":
        print(f"text: {out['text']}  patterns: {', '.join(out['patterns'])}")
        if not out["matches"]:
            print("(no matches)"); return
        print("Pattern   Start  End")
        for m in out["matches"]:
            print(f"{m['pattern']:<9} {m['start']:<6} {m['end']}")
    elif demo == "slide-multiply":
        print(f"text: {out['text']}  pattern: {out['pattern']}")
        print("scores: " + " ".join(str(s) for s in out["scores"]))
        print("exact matches at: " + (", ".join(map(str, out["matches"])) or "none"))
    elif demo == "signal":
        print(f"{out['base']} in {out['sequence']}: {' '.join(map(str, out['signal']))}")
    elif demo == "fft":
        print(f"text: {out['text']}  pattern: {out['pattern']}  N={out['padded_length']}")
        for base, vals in out["per_class"].items():
            print(f"  {base}: {' '.join(map(str, vals))}")
        print("total: " + " ".join(map(str, out["total"])))
        print("perfect matches: " + (", ".join(map(str, out["perfect_matches"])) or "none"))
        if "step" in out:
            _print_fft_step(out["step"])


def _print_fft_step(st: dict) -> None:
    print(f"[step {st['index']}] {st['name']}")
    for key in ("text_fft", "pattern_fft", "multiplied", "inverse"):
        for base, pairs in st.get(key, {}).items():
            print(f"  {key}[{base}]: " + " ".join(format_complex(complex(r, i)) for r, i in pairs))


def _repl(text: str, patterns: list[str]) -> None:
    session = step_session(text, patterns)
    print(f"Stepping {session.text!r} over {', '.join(patterns)}. Enter = next char, 'q' = quit.")
    while not session.done:
        try:
            cmd = input("> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print(); break
        if cmd == "q":
            break
        ev = session.step()
        msg = f"Step {ev.position + 1}: '{ev.char}' {ev.previous_state} -> {ev.state}"
        if ev.used_failure_link:
            msg += " (used failure link)"
        if ev.matches:
            msg += " | found: " + ", ".join(m.pattern for m in ev.matches)
        print(msg)
    print(f"Matches: {len(session.matches)}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Pattern Lab CLI (DemoEngine-backed)")
    p.add_argument("--demo", choices=sorted(DEMOS), required=True, help="Demo to run")
    p.add_argument("--text", default=None, help="Text to scan")
    p.add_argument("--pattern", default=None, help="Pattern (slide-multiply, fft)")
    p.add_argument("--patterns", nargs="+", default=None, help="Patterns (aho-corasick)")
    p.add_argument("--sequences", nargs="+", default=None, help="Sequences to insert (trie)")
    p.add_argument("--query", default=None, help="Sequence to look up (trie)")
    p.add_argument("--sequence", default=None, help="Sequence to encode (signal)")
    p.add_argument("--base", default=None, help="Base to encode (signal)")
    p.add_argument("--step", type=int, default=None, help="FFT walkthrough step 0..6")
    p.add_argument("--no-caps", action="store_true", help="Do not truncate demo inputs")
    p.add_argument("--json", action="store_true", help="Emit the full JSON trace")
    p.add_argument("--repl", action="store_true", help="Step the automaton interactively")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    initialize(apply_caps=not args.no_caps)
    props = {
        "text": args.text, "pattern": args.pattern, "patterns": args.patterns,
        "sequences": args.sequences, "query": args.query, "sequence": args.sequence,
        "base": args.base, "step": args.step,
    }
    try:
        if args.repl:
            if args.demo != "aho-corasick":
                p.error("--repl is only available for --demo aho-corasick")
            defaults = DEMOS["aho-corasick"]["defaults"]
            _repl(args.text or defaults["text"], args.patterns or defaults["patterns"])
            return 0
        out = run(args.demo, **props)
    except (PatternLabError, ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(out, indent=2))
    else:
        _print_summary(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
