from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from patternlab.automaton import AhoCorasick
from patternlab.correlation import correlate, step as fft_step
from patternlab.engine import DemoEngine
from patternlab.errors import PatternLabError, UnknownDemoError
from patternlab.trie import Trie

app = Flask(__name__)
_engine: DemoEngine | None = None


def _get_engine() -> DemoEngine:
    global _engine
    if _engine is None:
        _engine = DemoEngine()
    return _engine


_LIST_KEYS = ("patterns", "sequences")


def _split_list(value) -> list[str]:
    """Comma-separated string or list of strings -> flat list of non-empty items."""
    items = value if isinstance(value, list) else [value]
    return [v.strip() for raw in items for v in str(raw).split(",") if v.strip()]


def _payload() -> dict:
    """JSON object body for POST, query string for GET (list values via repeated keys or commas)."""
    if request.method == "POST":
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("request body must be a JSON object")
        out = dict(data)
    else:
        out = {key: request.args.getlist(key)[-1] for key in request.args}
        for key in _LIST_KEYS:
            if key in request.args:
                out[key] = request.args.getlist(key)
    for key in _LIST_KEYS:
        if key in out and out[key] is not None:
            out[key] = _split_list(out[key])
    out.pop("demo_id", None)
    return out


# ---------- errors ----------
@app.errorhandler(UnknownDemoError)
def _unknown_demo(exc: UnknownDemoError):
    return jsonify({"error": str(exc)}), 404


@app.errorhandler(PatternLabError)
@app.errorhandler(ValueError)
@app.errorhandler(IndexError)
def _bad_request(exc: Exception):
    return jsonify({"error": str(exc)}), 400


# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True, "demos": len(_get_engine().catalogue)})


@app.get("/api/demos")
def api_demos():
    eng = _get_engine()
    return jsonify({"demos": eng.demos(), "categories": eng.categories()})


@app.route("/api/demos/<demo_id>", methods=["GET", "POST"])
def api_run_demo(demo_id: str):
    return jsonify(_get_engine().run(demo_id, **_payload()))


@app.post("/api/trie/search")
def api_trie_search():
    data = _payload()
    trie = Trie()
    for seq in data.get("sequences", []):
        trie.insert(seq)
    return jsonify(trie.search(str(data.get("query", ""))).to_dict())


@app.post("/api/aho-corasick/steps")
def api_aho_corasick_steps():
    """Events for the first ``upto`` characters (all when omitted)."""
    data = _payload()
    ac = AhoCorasick()
    for p in data.get("patterns", []):
        ac.add_pattern(p)
    session = ac.session(str(data.get("text", "")))
    upto = data.get("upto")
    limit = len(session.text) if upto is None else int(upto)  # type: ignore[arg-type]
    while not session.done and session.position < limit:
        session.step()
    return jsonify({
        "position": session.position,
        "state": session.state.id,
        "done": session.done,
        "matches": [m.to_dict() for m in session.matches],
        "events": [e.to_dict() for e in session.events],
    })


@app.get("/api/fft/step/<int:index>")
def api_fft_step(index: int):
    text = request.args.get("text", "", type=str)
    pattern = request.args.get("pattern", "", type=str)
    return jsonify(fft_step(correlate(text, pattern), index))


# ---------- UI ----------
@app.get("/")
def home():
    # Demo index only; the interactive views live in the blog front end.
    rows = "".join(
        f'<li><a href="/api/demos/{d["id"]}"><code>{d["id"]}</code></a> {d["name"]}: {d["description"]}</li>'
        for d in _get_engine().demos()
    )
    html = f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>Pattern Lab</title>
<style>
body{{margin:0;background:#0b0f14;color:#cfd8e3;font:16px/1.45 system-ui,sans-serif}}
.container{{max-width:860px;margin:24px auto;padding:0 16px}}
a{{color:#6ee7ff;text-decoration:none}}
code{{background:#111825;padding:1px 6px;border-radius:6px}}
</style>
</head>
<body>
  <div class="container">
    <h1>Pattern Lab</h1>
    <p>JSON traces for each demo. Override defaults with query parameters,
       e.g. <code>/api/demos/fft?text=ATCGATCG&amp;pattern=TCG&amp;step=6</code>.</p>
    <ul>{rows}</ul>
  </div>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the Flask JSON API on top of DemoEngine")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--no-caps", action="store_true", help="Do not truncate demo inputs")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    global _engine
    _engine = DemoEngine(apply_caps=not args.no_caps)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
