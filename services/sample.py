# services/sample.py
from __future__ import annotations
from typing import Tuple
from errors import InvalidRangeError
from rng.state import GeneratorState

def draw(state: GeneratorState, low: int, high: int) -> int:
    """
    Равномерное целое из [low, high] включительно, произвольная точность.
    Единственный побочный эффект - сдвиг состояния генератора.
    """
    if low > high:
        raise InvalidRangeError(low, high)
    span = high - low + 1
    return low + state.below(span)

def sample_range_by_seed(seed: int, n1: int, n2: int, label: str = "RANGE/v1") -> Tuple[int, dict]:
    """Одна честная выборка из [lo, hi] по явному seed; границы в любом порядке."""
    lo, hi = sorted((int(n1), int(n2)))
    state = GeneratorState(seed, label=label)
    value = draw(state, lo, hi)
    meta = {
        "lo": lo, "hi": hi, "rangeSize": hi - lo + 1,
        "rejected": state.rejected, "label": label,
    }
    return value, meta
