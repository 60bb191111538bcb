"""Tests for roll parameters, validation and budgets."""

import pytest

from reverie_dice.errors import ConfigurationError
from reverie_dice.infra.config import Settings
from reverie_dice.modules.dice.parameters import (
    DEFAULT_FACES_COUNT,
    INFINITE,
    Budget,
    RollParameters,
    validate_parameters,
)


def test_defaults():
    params = RollParameters()
    assert params.faces_count == DEFAULT_FACES_COUNT == 6
    assert params.dices_count == 1
    assert not params.has_infinite_rerolls
    assert not params.has_infinite_bursts


def test_infinite_flags():
    params = RollParameters(rerolls_count=INFINITE, bursts_count=-5)
    assert params.has_infinite_rerolls
    assert params.has_infinite_bursts


def test_validation_accepts_edge_values():
    validate_parameters(RollParameters(faces_count=1, dices_count=0, additional_dices_count=0))


def test_validation_reports_every_problem():
    with pytest.raises(ConfigurationError) as exc_info:
        validate_parameters(
            RollParameters(faces_count=0, dices_count=-1, additional_dices_count=-1)
        )
    message = str(exc_info.value)
    assert "faces_count" in message
    assert "dices_count" in message
    assert "additional_dices_count" in message


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        validate_parameters(RollParameters(faces_count=-3))


def test_from_settings(monkeypatch):
    monkeypatch.setenv("DEFAULT_DICE_TYPE", "20")
    monkeypatch.setenv("DEFAULT_BURSTS_COUNT", "-1")
    monkeypatch.setenv("DEFAULT_BONUS", "4")
    params = RollParameters.from_settings(Settings())
    assert params.faces_count == 20
    assert params.has_infinite_bursts
    assert params.bonus == 4


class TestBudget:
    def test_finite_budget_takes_prefix(self):
        budget = Budget.from_count(2)
        assert budget.take(["a", "b", "c"]) == ["a", "b"]
        budget.spend(2)
        assert budget.exhausted
        assert budget.take(["a"]) == []

    def test_zero_budget_is_exhausted(self):
        assert Budget.from_count(0).exhausted

    def test_unlimited_budget_never_runs_out(self):
        budget = Budget.from_count(INFINITE)
        assert budget.unlimited
        budget.spend(1000)
        assert not budget.exhausted
        assert budget.take([1, 2, 3]) == [1, 2, 3]
