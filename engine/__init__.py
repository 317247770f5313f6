"""Poker decision-support engine: hand scoring, Monte Carlo equity and action advice."""

from .analysis import HandAnalysis, analyze_hand
from .cards import Card, RANKS, SUITS, build_remaining_deck, find_duplicates, parse_cards, shuffle
from .equity import EquitySimulator, calculate_equity
from .evaluator import evaluate_hand, get_best_hand
from .models import (
    Action,
    ActionRecommendation,
    EquityResult,
    EvaluatedHand,
    GameState,
    HandCategory,
    Position,
    SolverConfig,
)
from .solver import solve_for_gto

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "build_remaining_deck",
    "find_duplicates",
    "parse_cards",
    "shuffle",
    "evaluate_hand",
    "get_best_hand",
    "EquitySimulator",
    "calculate_equity",
    "solve_for_gto",
    "HandAnalysis",
    "analyze_hand",
    "Action",
    "ActionRecommendation",
    "EquityResult",
    "EvaluatedHand",
    "GameState",
    "HandCategory",
    "Position",
    "SolverConfig",
]
