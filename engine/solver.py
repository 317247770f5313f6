from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from .equity import calculate_equity
from .evaluator import ROYAL_FLUSH_SCORE, evaluate_hand
from .models import Action, ActionRecommendation, GameState, Position

LOGGER = logging.getLogger("poker_engine.solver")

# Heuristic recommender: equity plus position or pot odds picks a fixed
# action mix. "iterations" only feeds the equity sample; nothing here
# iterates toward an equilibrium.

POSITION_ADJUSTMENT = {
    Position.BTN: 0.10,
    Position.CO: 0.05,
    Position.MP: 0.0,
    Position.UTG: -0.05,
    Position.SB: -0.02,
    Position.BB: 0.02,
}

# (action, raw weight, EV kind)
_Template = List[Tuple[Action, float, str]]

PREFLOP_BANDS: List[Tuple[float, _Template]] = [
    (0.7, [(Action.RAISE, 0.8, "aggressive"), (Action.CALL, 0.2, "passive")]),
    (0.5, [(Action.RAISE, 0.5, "aggressive"), (Action.CALL, 0.3, "passive"), (Action.FOLD, 0.2, "fold")]),
    (0.3, [(Action.CALL, 0.6, "passive"), (Action.FOLD, 0.4, "fold")]),
]
PREFLOP_FALLBACK: _Template = [(Action.CALL, 0.2, "passive"), (Action.FOLD, 0.8, "fold")]

# Thresholds are multiples of pot odds.
POSTFLOP_BANDS: List[Tuple[float, _Template]] = [
    (1.5, [(Action.BET, 0.7, "value"), (Action.CHECK, 0.3, "check")]),
    (1.0, [(Action.BET, 0.4, "value"), (Action.CHECK, 0.6, "check")]),
    (0.7, [(Action.BET, 0.2, "bluff"), (Action.CHECK, 0.8, "check")]),
]
POSTFLOP_FALLBACK: _Template = [(Action.BET, 0.1, "bluff"), (Action.CHECK, 0.9, "check")]


def solve_for_gto(
    game_state: GameState,
    iterations: int = 1_000,
    *,
    rng: Optional[random.Random] = None,
) -> List[ActionRecommendation]:
    """Recommend a weighted action mix for the hero's spot.

    Returns an empty list unless the hero holds exactly two cards.
    Frequencies are integer percentages summing to 100 (give or take one
    from rounding), highest first.
    """
    if len(game_state.player_cards) != 2:
        return []

    equity = calculate_equity(
        game_state.player_cards,
        [],
        game_state.community_cards,
        iterations,
        rng=rng,
    ).player_equity

    pot = game_state.pot_size
    bet = game_state.bet_size

    if game_state.is_preflop:
        adjustment = POSITION_ADJUSTMENT.get(Position(game_state.position), 0.0)
        strength = min(1.0, max(0.0, equity + adjustment))
        template = _pick_band(strength, PREFLOP_BANDS, PREFLOP_FALLBACK, scale=1.0)
        LOGGER.debug("Preflop %s: equity=%.3f adjusted=%.3f", game_state.position, equity, strength)
    else:
        score = evaluate_hand(game_state.player_cards + game_state.community_cards).score
        hand_strength = min(1.0, score / ROYAL_FLUSH_SCORE)
        strength = 0.7 * equity + 0.3 * hand_strength
        pot_odds = pot_odds_for(pot, bet)
        template = _pick_band(strength, POSTFLOP_BANDS, POSTFLOP_FALLBACK, scale=pot_odds)
        LOGGER.debug(
            "Postflop: equity=%.3f hand_strength=%.3f combined=%.3f pot_odds=%.3f",
            equity,
            hand_strength,
            strength,
            pot_odds,
        )

    total = sum(weight for _, weight, _ in template)
    recommendations = [
        ActionRecommendation(
            action=action,
            frequency=round(weight / total * 100),
            ev=_expected_value(kind, pot, bet, strength),
        )
        for action, weight, kind in template
    ]
    recommendations.sort(key=lambda rec: rec.frequency, reverse=True)
    return recommendations


def pot_odds_for(pot: float, bet: float) -> float:
    if pot + bet == 0:
        return 0.0
    return bet / (pot + bet)


def _pick_band(
    strength: float,
    bands: List[Tuple[float, _Template]],
    fallback: _Template,
    scale: float,
) -> _Template:
    for threshold, template in bands:
        if strength > threshold * scale:
            return template
    return fallback


def _expected_value(kind: str, pot: float, bet: float, strength: float) -> float:
    if kind == "aggressive" or kind == "bluff":
        return pot * strength - (1 - strength) * bet
    if kind == "passive":
        return pot * strength - (1 - strength) * bet * 0.5
    if kind == "value":
        return pot * strength
    if kind == "check":
        return pot * strength * 0.8
    return 0.0
