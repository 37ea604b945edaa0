# services/unique.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Set
from errors import (
    AllocationError, InvalidNumberError, InvalidRangeError, InvalidCountError, CountTooLargeError,
)
from rng.state import GeneratorState
from services.sample import draw

DIRECT = "direct"
COMPLEMENT = "complement"

def _as_int(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidNumberError(str(value))
    return value

def complement_threshold(size: int) -> int:
    return -(-size // 2)

def choose_strategy(size: int, count: int) -> str:
    # ceil(size/2) < count -> выгоднее тянуть дополнение
    return COMPLEMENT if complement_threshold(size) < count else DIRECT

@dataclass(frozen=True)
class DrawPlan:
    """Проверенная тройка (low, high, count). После создания не меняется."""

    low: int
    high: int
    count: int

    def __post_init__(self):
        low, high, count = _as_int(self.low), _as_int(self.high), _as_int(self.count)
        if low >= high:
            raise InvalidRangeError(low, high)
        if count < 0:
            raise InvalidCountError(count)
        size = high - low + 1
        if count >= size:
            raise CountTooLargeError(count, size)

    @property
    def size(self) -> int:
        return self.high - self.low + 1

    @property
    def threshold(self) -> int:
        return complement_threshold(self.size)

    @property
    def strategy(self) -> str:
        return choose_strategy(self.size, self.count)

def _distinct(state: GeneratorState, low: int, high: int, n: int) -> Set[int]:
    """Rejection sampling: повторы отбрасываем и тянем заново, пока не наберём n."""
    chosen: Set[int] = set()
    while len(chosen) < n:
        chosen.add(draw(state, low, high))
    return chosen

def _walk_excluding(low: int, high: int, excluded: Set[int]) -> Iterator[int]:
    # верхняя граница включительно
    for value in range(low, high + 1):
        if value not in excluded:
            yield value

def generate_plan(state: GeneratorState, plan: DrawPlan) -> Iterator[int]:
    try:
        if plan.strategy == COMPLEMENT:
            # выборка идёт сразу, сам обход - лениво
            excluded = _distinct(state, plan.low, plan.high, plan.size - plan.count)
            return _walk_excluding(plan.low, plan.high, excluded)
        return iter(sorted(_distinct(state, plan.low, plan.high, plan.count)))
    except MemoryError:
        raise AllocationError() from None

def generate(state: GeneratorState, low: int, high: int, count: int) -> Iterator[int]:
    """
    count различных целых из [low, high] по возрастанию.
    Ошибки валидации летят до первой выборки.
    """
    return generate_plan(state, DrawPlan(low, high, count))

def unique_sample(state: GeneratorState, low: int, high: int, count: int) -> List[int]:
    return list(generate(state, low, high, count))
