from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional

from .cards import Card


class HandCategory(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}

INCOMPLETE_HAND = "Incomplete Hand"


class Position(str, Enum):
    BTN = "BTN"
    SB = "SB"
    BB = "BB"
    UTG = "UTG"
    MP = "MP"
    CO = "CO"


class Action(str, Enum):
    FOLD = "Fold"
    CHECK = "Check"
    CALL = "Call"
    BET = "Bet"
    RAISE = "Raise"
    ALL_IN = "All-In"


@dataclass(frozen=True)
class EvaluatedHand:
    category: Optional[HandCategory]
    score: int

    @property
    def name(self) -> str:
        if self.category is None:
            return INCOMPLETE_HAND
        return self.category.label


@dataclass(frozen=True)
class EquityResult:
    """Win/loss/tie counters from a Monte Carlo run.

    Every completed iteration lands in exactly one bucket, so
    ``wins + losses + ties == iterations`` holds exactly. The fractions are
    each divided out of the counters and sum to one only up to float rounding;
    compare the counters when an exact total matters.
    """

    wins: int = 0
    losses: int = 0
    ties: int = 0
    iterations: int = 0

    @property
    def player_equity(self) -> float:
        return self.wins / self.iterations if self.iterations else 0.0

    @property
    def opponent_equity(self) -> float:
        return self.losses / self.iterations if self.iterations else 0.0

    @property
    def tie_equity(self) -> float:
        return self.ties / self.iterations if self.iterations else 0.0


@dataclass
class GameState:
    player_cards: List[Card]
    community_cards: List[Card] = field(default_factory=list)
    position: Position = Position.BTN
    pot_size: float = 100
    bet_size: float = 75
    stack_size: float = 1_000
    is_preflop: bool = True


@dataclass(frozen=True)
class ActionRecommendation:
    action: Action
    frequency: int
    ev: float


@dataclass
class SolverConfig:
    default_equity_iterations: int = 1_000
    default_solver_iterations: int = 1_000
    min_iterations: int = 100
    max_iterations: int = 100_000
    batch_size: int = 1_000
