"""Unit tests for RunDriver."""

import numpy as np
import pytest

from pulsesim.core.driver import RunDriver, RunDriverConfig, pulse_product
from pulsesim.core.errors import NonTerminatingTickError, SearchExhaustedError
from pulsesim.core.network import Network
from pulsesim.description import parse_description


def toggle_chain(k: int) -> list[tuple]:
    """broadcaster -> t1 -> ... -> tk -> g -> output."""
    names = [f"t{i}" for i in range(1, k + 1)]
    declarations = [("broadcaster", "relay", [names[0]])]
    for name, nxt in zip(names, names[1:] + ["g"]):
        declarations.append((name, "toggle", [nxt]))
    declarations.append(("g", "gate", ["output"]))
    return declarations


class TestRunDriverConfig:
    """Tests for RunDriverConfig."""

    def test_default_config(self):
        cfg = RunDriverConfig()
        assert cfg.trigger == "broadcaster"
        assert cfg.max_signals_per_tick is None


class TestFixedCount:
    """Tests for fixed-count aggregation."""

    def test_published_example_1(self, example1_text):
        driver = RunDriver(Network(parse_description(example1_text)))
        stats = driver.run(1000)
        assert (stats["high"], stats["low"]) == (4000, 8000)
        assert stats["product"] == 32000000

    def test_published_example_2(self, example2_text):
        driver = RunDriver(Network(parse_description(example2_text)))
        stats = driver.run(1000)
        assert (stats["high"], stats["low"]) == (2750, 4250)
        assert stats["product"] == 11687500

    def test_two_toggle_scenario(self, two_toggle_declarations):
        stats = RunDriver(Network(two_toggle_declarations)).run(1000)
        assert (stats["high"], stats["low"]) == (2500, 4500)

    def test_deterministic_across_runs(self, example2_text):
        first = RunDriver(Network(parse_description(example2_text))).run(250)
        second = RunDriver(Network(parse_description(example2_text))).run(250)
        assert first == second

    def test_state_carries_over_between_runs(self, example2_text):
        split = RunDriver(Network(parse_description(example2_text)))
        a = split.run(400)
        b = split.run(600)

        whole = RunDriver(Network(parse_description(example2_text))).run(1000)

        assert a["high"] + b["high"] == whole["high"]
        assert a["low"] + b["low"] == whole["low"]
        assert split.current_tick == 1000

    def test_zero_ticks(self, example1_text):
        stats = RunDriver(Network(parse_description(example1_text))).run(0)
        assert stats["product"] == 0
        assert stats["current_tick"] == 0

    def test_negative_ticks_rejected(self, example1_text):
        with pytest.raises(ValueError):
            RunDriver(Network(parse_description(example1_text))).run(-1)

    def test_history(self, two_toggle_declarations):
        driver = RunDriver(Network(two_toggle_declarations))
        driver.run(4)

        history = driver.get_history()

        assert history.shape == (4, 2)
        assert history.dtype == np.int64
        np.testing.assert_array_equal(history, [[3, 4], [2, 5], [3, 4], [2, 5]])

    def test_empty_history(self, two_toggle_declarations):
        assert RunDriver(Network(two_toggle_declarations)).get_history().shape == (0, 2)

    def test_step_budget_applies(self, example1_text):
        driver = RunDriver(
            Network(parse_description(example1_text)),
            RunDriverConfig(max_signals_per_tick=3),
        )
        with pytest.raises(NonTerminatingTickError):
            driver.run(1)

    def test_pulse_product(self, example1_text):
        assert pulse_product(Network(parse_description(example1_text))) == 32000000


class TestFirstOccurrence:
    """Tests for first-occurrence search."""

    @pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 8])
    def test_binary_counter(self, k):
        driver = RunDriver(Network(toggle_chain(k)))
        assert driver.first_occurrence("g", polarity=True) == 2 ** k

    def test_first_low(self):
        # The gate first emits low when t3 first emits high
        driver = RunDriver(Network(toggle_chain(3)))
        assert driver.first_occurrence("g", polarity=False) == 2 ** 2

    def test_counts_from_call(self):
        driver = RunDriver(Network(toggle_chain(2)))
        assert driver.first_occurrence("g") == 4
        # State carried over: g emits high again four triggers later
        assert driver.first_occurrence("g") == 4
        assert driver.current_tick == 8

    @pytest.mark.parametrize("period", [3, 5, 7, 11])
    def test_counter_period(self, counter_factory, period):
        declarations = [("broadcaster", "relay", ["x1"])] + counter_factory("x", period)
        driver = RunDriver(Network(declarations))
        assert driver.first_occurrence("xh", polarity=True) == period

    def test_budget_exhausted(self):
        driver = RunDriver(Network(toggle_chain(4)))
        with pytest.raises(SearchExhaustedError) as exc_info:
            driver.first_occurrence("g", max_triggers=10)
        assert exc_info.value.max_triggers == 10
        assert driver.current_tick == 10

    def test_budget_met_exactly(self):
        driver = RunDriver(Network(toggle_chain(4)))
        assert driver.first_occurrence("g", max_triggers=16) == 16

    def test_search_does_not_add_history(self):
        driver = RunDriver(Network(toggle_chain(2)))
        driver.first_occurrence("g")
        assert driver.get_history().shape == (0, 2)
