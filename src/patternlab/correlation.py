from __future__ import annotations
import logging
from typing import Dict, List

from . import config as CFG
from .fft import fft, ifft, next_power_of_two, as_pairs
from .models import CorrelationResult
from .normalize import clean
from .signals import encode

log = logging.getLogger(__name__)


def padded_length(text_len: int, pattern_len: int) -> int:
    """Next power of two >= text_len + pattern_len - 1 (and >= either length), never below MIN_FFT_LENGTH."""
    need = max(text_len + pattern_len - 1, text_len, pattern_len)
    return next_power_of_two(need, minimum=CFG.MIN_FFT_LENGTH)


def correlate(text: str, pattern: str) -> CorrelationResult:
    """
    Cross-correlate per-base indicator signals through the frequency domain.

    For each base b:  C_b = IFFT( FFT(T_b) * conj(FFT(P_b)) )
    Conjugating the pattern spectrum gives correlation rather than
    convolution, so the pattern signal is never reversed. Real parts are
    rounded and the first len(text)-len(pattern)+1 entries kept; ``total`` is
    their sum over all bases and agrees with sliding.compute_scores().
    Degenerate input (empty pattern, pattern longer than text) keeps the
    signals and spectra but has empty per-class and total scores.
    """
    t, p = clean(text), clean(pattern)
    n = padded_length(len(t), len(p))
    valid = len(t) - len(p) + 1 if p and len(p) <= len(t) else 0

    res = CorrelationResult(text=t, pattern=p, padded_length=n)
    res.text_signals = encode(t, n)
    res.pattern_signals = encode(p, n)
    for b in CFG.ALPHABET:
        ts = fft(res.text_signals[b])
        ps = fft(res.pattern_signals[b])
        mult = [x * y.conjugate() for x, y in zip(ts, ps)]
        inv = ifft(mult)
        res.text_spectra[b] = ts
        res.pattern_spectra[b] = ps
        res.multiplied[b] = mult
        res.inverse[b] = inv
        res.per_class[b] = [_to_count(z, b, i) for i, z in enumerate(inv[:valid])]

    res.total = [sum(res.per_class[b][i] for b in CFG.ALPHABET) for i in range(valid)]
    log.debug("correlate text=%s pattern=%s N=%d positions=%d", t, p, n, valid)
    return res


def _to_count(z: complex, base: str, i: int) -> int:
    r = round(z.real)
    if abs(z.real - r) > CFG.ROUND_TOLERANCE or abs(z.imag) > CFG.ROUND_TOLERANCE:
        log.warning("correlation %s[%d]=%r is not close to an integer", base, i, z)
    return int(r)


# ---------- step-by-step walkthrough ----------

def _spectra(d: Dict[str, List[complex]]) -> Dict[str, List[List[float]]]:
    return {b: as_pairs(v) for b, v in d.items()}


def step(result: CorrelationResult, index: int) -> dict:
    """
    Artifacts for one walkthrough step:
      0 input, 1 signals, 2 text-fft, 3 pattern-fft, 4 multiply, 5 ifft, 6 results
    Complex values are emitted as [real, imag].
    """
    if not 0 <= index < len(CFG.FFT_STEPS):
        raise IndexError(f"step index must be 0..{len(CFG.FFT_STEPS) - 1}, got {index}")
    out: dict = {"index": index, "step": CFG.FFT_STEPS[index], "name": CFG.FFT_STEP_NAMES[index]}
    if index == 0:
        out.update(text=result.text, pattern=result.pattern, padded_length=result.padded_length)
    elif index == 1:
        out.update(text_signals=result.text_signals, pattern_signals=result.pattern_signals)
    elif index == 2:
        out.update(text_fft=_spectra(result.text_spectra))
    elif index == 3:
        out.update(pattern_fft=_spectra(result.pattern_spectra))
    elif index == 4:
        out.update(
            text_fft=_spectra(result.text_spectra),
            pattern_fft=_spectra(result.pattern_spectra),
            multiplied=_spectra(result.multiplied),
        )
    elif index == 5:
        out.update(inverse=_spectra(result.inverse), correlations=result.per_class)
    else:
        out.update(
            correlations=result.per_class,
            total=result.total,
            perfect_matches=result.perfect_matches(),
        )
    return out


def steps(result: CorrelationResult) -> List[dict]:
    return [step(result, i) for i in range(len(CFG.FFT_STEPS))]
