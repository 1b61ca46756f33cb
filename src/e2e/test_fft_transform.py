import random
import numpy as np
import pytest
from patternlab.fft import fft, ifft, next_power_of_two, is_power_of_two, pad, format_complex


def _close(a, b, tol=1e-9):
    return len(a) == len(b) and all(abs(x - y) <= tol for x, y in zip(a, b))


def test_impulse_and_constant_signals():
    assert _close(fft([1, 0, 0, 0]), [1, 1, 1, 1])
    assert _close(fft([1, 1, 1, 1]), [4, 0, 0, 0])
    assert fft([5]) == [5 + 0j]
    assert fft([]) == []


@pytest.mark.parametrize("n", [1, 2, 4, 8, 16, 32, 64])
def test_round_trip_recovers_signal(n):
    rnd = random.Random(n)
    sig = [rnd.uniform(-3, 3) for _ in range(n)]
    back = ifft(fft(sig))
    assert _close(back, sig, tol=1e-6)
    assert all(abs(z.imag) < 1e-6 for z in back)


@pytest.mark.parametrize("n", [2, 8, 32])
def test_matches_numpy_reference(n):
    rnd = random.Random(7 * n)
    sig = [complex(rnd.uniform(-1, 1), rnd.uniform(-1, 1)) for _ in range(n)]
    ours = fft(sig)
    ref = np.fft.fft(np.array(sig))
    assert _close(ours, list(ref), tol=1e-9)
    assert _close(ifft(sig), list(np.fft.ifft(np.array(sig))), tol=1e-9)


def test_non_power_of_two_length_is_rejected():
    with pytest.raises(ValueError):
        fft([1, 2, 3])
    with pytest.raises(ValueError):
        ifft([1, 2, 3, 4, 5, 6])


def test_power_of_two_helpers():
    assert [next_power_of_two(n) for n in (0, 1, 2, 3, 5, 8, 9)] == [1, 1, 2, 4, 8, 8, 16]
    assert next_power_of_two(3, minimum=8) == 8
    assert next_power_of_two(15, minimum=8) == 16
    assert is_power_of_two(16) and not is_power_of_two(12) and not is_power_of_two(0)
    assert pad([1, 1], 4) == [1, 1, 0, 0]
    with pytest.raises(ValueError):
        pad([1, 1, 1], 2)


@pytest.mark.parametrize("z,text", [
    (3 + 0.05j, "3.0"),
    (0.05 + 2j, "2.0i"),
    (1 - 2j, "1.0-2.0i"),
    (1.26 + 2.5j, "1.3+2.5i"),
    (-0.04 - 0.02j, "-0.0"),
])
def test_format_complex(z, text):
    assert format_complex(z) == text
