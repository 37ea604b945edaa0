import pytest
from errors import CountTooLargeError, InvalidCountError, InvalidNumberError, InvalidRangeError
from rng.state import GeneratorState
from services.unique import (
    COMPLEMENT, DIRECT, DrawPlan, choose_strategy, complement_threshold, generate, unique_sample,
)


def _check(values, low, high, count):
    assert len(values) == count
    assert all(low <= v <= high for v in values)
    # строго по возрастанию -> заодно без повторов
    assert all(a < b for a, b in zip(values, values[1:]))


class TestDrawPlan:

    def test_threshold_and_strategy(self):
        assert complement_threshold(10) == 5
        assert complement_threshold(5) == 3
        assert DrawPlan(1, 10, 3).strategy == DIRECT
        assert DrawPlan(1, 5, 3).strategy == DIRECT
        assert DrawPlan(1, 5, 4).strategy == COMPLEMENT
        assert choose_strategy(6, 3) == DIRECT
        assert choose_strategy(6, 4) == COMPLEMENT

    def test_inverted_range(self):
        with pytest.raises(InvalidRangeError):
            DrawPlan(5, 3, 1)

    def test_equal_bounds(self):
        with pytest.raises(InvalidRangeError):
            DrawPlan(4, 4, 0)

    def test_count_equal_to_size(self):
        with pytest.raises(CountTooLargeError) as exc:
            DrawPlan(1, 10, 10)
        assert exc.value.size == 10

    def test_negative_count(self):
        with pytest.raises(InvalidCountError):
            DrawPlan(1, 10, -1)

    def test_non_integer(self):
        with pytest.raises(InvalidNumberError):
            DrawPlan("1", 10, 2)
        with pytest.raises(InvalidNumberError):
            DrawPlan(1, 10, True)

    def test_immutable(self):
        plan = DrawPlan(1, 10, 2)
        with pytest.raises(AttributeError):
            plan.low = 0

    def test_validation_happens_before_any_draw(self):
        state = GeneratorState(1)
        with pytest.raises(CountTooLargeError):
            generate(state, 1, 10, 10)
        assert state.draws == 0


class TestGenerate:

    def test_direct_path(self):
        values = unique_sample(GeneratorState(1), 1, 10, 3)
        _check(values, 1, 10, 3)

    def test_complement_path(self):
        values = unique_sample(GeneratorState(2), 1, 5, 4)
        _check(values, 1, 5, 4)

    def test_count_zero(self):
        state = GeneratorState(3)
        assert unique_sample(state, 1, 10, 0) == []
        assert state.draws == 0

    def test_maximum_count_misses_exactly_one(self):
        for seed in range(40):
            values = unique_sample(GeneratorState(seed), 1, 10, 9)
            _check(values, 1, 10, 9)
            assert len(set(range(1, 11)) - set(values)) == 1

    def test_upper_bound_is_reachable_on_complement_path(self):
        # high должен попадать в выход, когда не исключён
        seen_high = any(
            unique_sample(GeneratorState(seed), 1, 10, 9)[-1] == 10 for seed in range(40)
        )
        assert seen_high

    def test_negative_bounds(self):
        values = unique_sample(GeneratorState(4), -20, -5, 12)
        _check(values, -20, -5, 12)

    def test_huge_range(self):
        low, high = 2**200, 2**200 + 10**30
        values = unique_sample(GeneratorState(5), low, high, 50)
        _check(values, low, high, 50)

    def test_huge_bounds_complement(self):
        low = -(10**50)
        values = unique_sample(GeneratorState(6), low, low + 99, 90)
        _check(values, low, low + 99, 90)

    def test_complement_output_is_lazy(self):
        it = generate(GeneratorState(7), 1, 1000, 900)
        assert not isinstance(it, list)
        assert next(it) >= 1

    def test_deterministic_for_same_seed(self):
        for count in (3, 80):
            a = unique_sample(GeneratorState(1234), 1, 100, count)
            b = unique_sample(GeneratorState(1234), 1, 100, count)
            assert a == b

    def test_different_seeds_differ(self):
        a = unique_sample(GeneratorState(1), 1, 10**12, 20)
        b = unique_sample(GeneratorState(2), 1, 10**12, 20)
        assert a != b

    def test_state_is_shared_between_calls(self):
        state = GeneratorState(8)
        first = unique_sample(state, 1, 10**9, 5)
        second = unique_sample(state, 1, 10**9, 5)
        assert first != second


def _chi_square(low, high, count, runs):
    size = high - low + 1
    freq = {v: 0 for v in range(low, high + 1)}
    for seed in range(runs):
        for v in unique_sample(GeneratorState(seed), low, high, count):
            freq[v] += 1
    expected = runs * count / size
    return sum((f - expected) ** 2 / expected for f in freq.values())


class TestUniformity:
    # 6 значений -> 5 степеней свободы; 30 соответствует p ~ 1.5e-5

    def test_direct_path_is_uniform(self):
        assert DrawPlan(1, 6, 2).strategy == DIRECT
        assert _chi_square(1, 6, 2, 3000) < 30

    def test_complement_path_is_uniform(self):
        assert DrawPlan(1, 6, 4).strategy == COMPLEMENT
        assert _chi_square(1, 6, 4, 3000) < 30


class TestResources:

    def test_memory_error_becomes_allocation_error(self, monkeypatch):
        from errors import AllocationError, ResourceError
        from services import unique

        def no_memory(*args, **kwargs):
            raise MemoryError()

        monkeypatch.setattr(unique, "_distinct", no_memory)
        for count in (3, 8):
            with pytest.raises(AllocationError) as exc:
                generate(GeneratorState(1), 1, 10, count)
            assert isinstance(exc.value, ResourceError)

    def test_plan_is_a_frozen_dataclass(self):
        import dataclasses
        plan = DrawPlan(1, 10, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            plan.count = 3
        assert plan == DrawPlan(1, 10, 2)
