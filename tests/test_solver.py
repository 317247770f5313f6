import random

import pytest

from engine import solver
from engine.models import Action, EquityResult, GameState, Position
from engine.solver import pot_odds_for, solve_for_gto

from .helpers import cards


def fixed_equity(wins: int, iterations: int = 100):
    def _calculate(*args, **kwargs):
        return EquityResult(wins=wins, losses=iterations - wins, ties=0, iterations=iterations)

    return _calculate


def test_solver_requires_two_hole_cards():
    assert solve_for_gto(GameState(player_cards=cards("As"))) == []
    assert solve_for_gto(GameState(player_cards=cards("As Ah Kd"))) == []


def test_preflop_premium_hand_on_button_raises():
    state = GameState(player_cards=cards("As Ah"), position=Position.BTN, is_preflop=True)
    recs = solve_for_gto(state, 2_000, rng=random.Random(3))

    assert [rec.action for rec in recs] == [Action.RAISE, Action.CALL]
    assert [rec.frequency for rec in recs] == [80, 20]


def test_preflop_trash_under_the_gun_mostly_folds():
    state = GameState(player_cards=cards("3c 2d"), position=Position.UTG, is_preflop=True)
    recs = solve_for_gto(state, 2_000, rng=random.Random(3))

    assert recs[0].action == Action.FOLD
    assert recs[0].ev == 0


def test_preflop_medium_band_expected_values(monkeypatch):
    monkeypatch.setattr(solver, "calculate_equity", fixed_equity(50))
    state = GameState(
        player_cards=cards("9s 9d"),
        position=Position.MP,
        pot_size=100,
        bet_size=50,
        is_preflop=True,
    )

    recs = solve_for_gto(state)

    assert [(rec.action, rec.frequency) for rec in recs] == [(Action.CALL, 60), (Action.FOLD, 40)]
    assert recs[0].ev == pytest.approx(100 * 0.5 - 0.5 * 50 * 0.5)
    assert recs[1].ev == 0


def test_preflop_position_bias_is_clamped(monkeypatch):
    monkeypatch.setattr(solver, "calculate_equity", fixed_equity(100))
    state = GameState(player_cards=cards("As Ah"), position=Position.BTN, pot_size=10, bet_size=10)

    recs = solve_for_gto(state)

    # Adjusted equity caps at 1.0, so the raise EV is the full pot.
    assert recs[0].action == Action.RAISE
    assert recs[0].ev == pytest.approx(10.0)


def test_preflop_strong_band_has_three_actions(monkeypatch):
    monkeypatch.setattr(solver, "calculate_equity", fixed_equity(60))
    state = GameState(player_cards=cards("As Kd"), position=Position.MP)

    recs = solve_for_gto(state)

    assert [(rec.action, rec.frequency) for rec in recs] == [
        (Action.RAISE, 50),
        (Action.CALL, 30),
        (Action.FOLD, 20),
    ]


def test_postflop_value_band_without_a_bet(monkeypatch):
    monkeypatch.setattr(solver, "calculate_equity", fixed_equity(50))
    state = GameState(
        player_cards=cards("As Kd"),
        community_cards=cards("2c 7h 9s"),
        pot_size=200,
        bet_size=0,
        is_preflop=False,
    )

    recs = solve_for_gto(state)
    combined = 0.7 * 0.5 + 0.3 * (solver.evaluate_hand(state.player_cards + state.community_cards).score / 9_000_000)

    assert [(rec.action, rec.frequency) for rec in recs] == [(Action.BET, 70), (Action.CHECK, 30)]
    assert recs[0].ev == pytest.approx(200 * combined)
    assert recs[1].ev == pytest.approx(200 * combined * 0.8)


def test_postflop_weak_hand_facing_big_bet_mostly_checks(monkeypatch):
    monkeypatch.setattr(solver, "calculate_equity", fixed_equity(5))
    state = GameState(
        player_cards=cards("3c 2d"),
        community_cards=cards("As Kh 9s 8d"),
        pot_size=100,
        bet_size=300,
        is_preflop=False,
    )

    recs = solve_for_gto(state)

    assert [(rec.action, rec.frequency) for rec in recs] == [(Action.CHECK, 90), (Action.BET, 10)]
    combined = 0.7 * 0.05 + 0.3 * (solver.evaluate_hand(state.player_cards + state.community_cards).score / 9_000_000)
    assert recs[1].ev == pytest.approx(100 * combined - (1 - combined) * 300)


def test_zero_pot_and_bet_are_guarded():
    assert pot_odds_for(0, 0) == 0.0
    state = GameState(
        player_cards=cards("Qh Qd"),
        community_cards=cards("2c 7h 9s"),
        pot_size=0,
        bet_size=0,
        is_preflop=False,
    )

    recs = solve_for_gto(state, 200, rng=random.Random(1))

    assert sum(rec.frequency for rec in recs) == 100
    assert all(rec.ev == 0 for rec in recs)


def test_recommendations_are_normalized_and_sorted():
    rng = random.Random(21)
    spots = [
        ("Ah Kh", "", Position.CO, True, 150, 50),
        ("8c 8d", "", Position.SB, True, 30, 20),
        ("Jc Td", "9h 8s 2d", Position.BB, False, 120, 90),
        ("5s 4s", "Ks Qs 2h 7c", Position.UTG, False, 60, 10),
        ("Ad Qc", "Ac Qd 3s 3h 9c", Position.MP, False, 500, 400),
    ]
    for player, board, position, preflop, pot, bet in spots:
        state = GameState(
            player_cards=cards(player),
            community_cards=cards(board),
            position=position,
            pot_size=pot,
            bet_size=bet,
            is_preflop=preflop,
        )
        recs = solve_for_gto(state, 300, rng=rng)

        frequencies = [rec.frequency for rec in recs]
        assert 99 <= sum(frequencies) <= 101
        assert frequencies == sorted(frequencies, reverse=True)
        assert all(rec.action in Action for rec in recs)
