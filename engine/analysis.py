from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .cards import Card
from .equity import calculate_equity
from .evaluator import evaluate_hand
from .ranges import format_hand, hand_shape, strength_label, strength_tier

PREFLOP = "Preflop"
QUICK_ITERATIONS = 200

_PREFLOP_ADVICE = {
    "Premium": [
        "Consider raising 3-4x the big blind",
        "Play aggressively from any position",
        "Re-raise (3-bet) if facing a raise",
    ],
    "Medium": [
        "Raise from late position",
        "Call raises from early position",
        "Consider folding to 3-bets unless you have position",
    ],
    "Playable": [
        "Play cautiously from late position",
        "Consider folding from early position",
        "Look for favorable flops with straight/flush potential",
    ],
    "Other": [
        "Play only in late position or blinds",
        "Consider folding to any raise",
        "Only continue if you hit the flop well",
    ],
}
_PREFLOP_ADVICE["Strong"] = _PREFLOP_ADVICE["Premium"]

_POSTFLOP_ADVICE = [
    (0.7, [
        "Your hand is very strong - consider value betting",
        "Aim to build the pot with bets and raises",
        "Be cautious of board texture changes on later streets",
    ]),
    (0.5, [
        "You have a good hand - consider betting for value",
        "Be prepared to call reasonable raises",
        "Watch for draws completing on later streets",
    ]),
    (0.3, [
        "Your hand is marginal - consider checking",
        "Call small bets if pot odds are favorable",
        "Be prepared to fold to significant pressure",
    ]),
]
_POSTFLOP_WEAK_ADVICE = [
    "Your hand is weak - consider checking and folding",
    "Look for cheap opportunities to improve",
    "Avoid committing chips without significant improvement",
]


@dataclass
class HandAnalysis:
    notation: str
    shape: str
    tier: str
    stage: str
    strength: float
    strength_label: str
    advice: List[str] = field(default_factory=list)


def analyze_hand(
    player_cards: Sequence[Card],
    community_cards: Sequence[Card] = (),
    equity: Optional[float] = None,
    *,
    iterations: int = QUICK_ITERATIONS,
    rng: Optional[random.Random] = None,
) -> Optional[HandAnalysis]:
    """Summarise a hole-card holding for display.

    Strength is a quick equity estimate against a random hand unless the
    caller already has a postflop ``equity`` figure. Returns None when the
    hero does not hold exactly two cards.
    """
    if len(player_cards) != 2:
        return None

    notation = format_hand(player_cards)
    tier = strength_tier(notation)
    preflop = len(community_cards) == 0

    if preflop:
        stage = PREFLOP
        strength = calculate_equity(player_cards, [], [], iterations, rng=rng).player_equity
        advice = _PREFLOP_ADVICE.get(tier, _PREFLOP_ADVICE["Other"])
    else:
        stage = evaluate_hand(list(player_cards) + list(community_cards)).name
        if equity is None:
            if len(community_cards) >= 3:
                equity = calculate_equity(player_cards, [], community_cards, iterations, rng=rng).player_equity
            else:
                equity = 0.0
        strength = equity
        advice = next((lines for threshold, lines in _POSTFLOP_ADVICE if equity > threshold), _POSTFLOP_WEAK_ADVICE)

    return HandAnalysis(
        notation=notation,
        shape=hand_shape(notation),
        tier=tier,
        stage=stage,
        strength=strength,
        strength_label=strength_label(strength),
        advice=list(advice),
    )
