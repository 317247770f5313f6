"""Starting-hand notation ("AKs", "T9o", "77"), strength tiers and opening ranges."""

from __future__ import annotations

from typing import Dict, List, Sequence

from .cards import RANKS, Card
from .models import Position

PAIR = "Pair"
SUITED = "Suited"
OFFSUIT = "Offsuit"

STRENGTH_TIERS: Dict[str, List[str]] = {
    "Premium": ["AA", "KK", "QQ", "AKs"],
    "Strong": ["JJ", "TT", "99", "AQs", "AJs", "AKo", "AQo"],
    "Medium": ["88", "77", "66", "ATs", "A9s", "A8s", "KQs", "KJs", "AJo", "KQo"],
    "Playable": [
        "55", "44", "33", "22", "A7s", "A6s", "A5s", "A4s", "A3s", "A2s",
        "KTs", "QJs", "JTs", "ATo", "KJo",
    ],
    "Speculative": ["K9s", "Q9s", "J9s", "T9s", "98s", "87s", "76s", "65s", "54s", "A9o", "KTo", "QJo"],
}
WEAK = "Weak"

_PAIRS_FROM_88 = ["AA", "KK", "QQ", "JJ", "TT", "99", "88"]
_ALL_PAIRS = [rank * 2 for rank in RANKS]
_SUITED_ACES = [f"A{rank}s" for rank in RANKS[1:]]
_SUITED_KINGS = [f"K{rank}s" for rank in RANKS[2:]]
_OFFSUIT_ACES = [f"A{rank}o" for rank in RANKS[1:]]

DEFAULT_RANGES: Dict[Position, List[str]] = {
    Position.UTG: _PAIRS_FROM_88 + ["AKs", "AQs", "AJs", "ATs", "KQs", "KJs", "AKo", "AQo"],
    Position.MP: _PAIRS_FROM_88 + ["77"] + [
        "AKs", "AQs", "AJs", "ATs", "A9s", "KQs", "KJs", "KTs", "QJs", "QTs", "JTs",
        "AKo", "AQo", "AJo", "KQo",
    ],
    Position.CO: _PAIRS_FROM_88 + ["77", "66", "55"] + _SUITED_ACES + [
        "KQs", "KJs", "KTs", "K9s", "QJs", "QTs", "Q9s", "JTs", "J9s", "T9s", "98s", "87s", "76s",
        "AKo", "AQo", "AJo", "ATo", "A9o", "KQo", "KJo", "QJo",
    ],
    Position.BTN: _ALL_PAIRS + _SUITED_ACES + _SUITED_KINGS + [
        "QJs", "QTs", "Q9s", "Q8s", "Q7s", "Q6s", "JTs", "J9s", "J8s", "T9s", "T8s",
        "98s", "87s", "76s", "65s", "54s",
    ] + _OFFSUIT_ACES + ["KQo", "KJo", "KTo", "K9o", "QJo", "QTo", "JTo"],
    Position.SB: _ALL_PAIRS + _SUITED_ACES + _SUITED_KINGS + [
        "QJs", "QTs", "Q9s", "Q8s", "Q7s", "JTs", "J9s", "T9s", "98s", "87s", "76s", "65s",
        "AKo", "AQo", "AJo", "ATo", "A9o", "A8o", "KQo", "KJo", "KTo", "QJo", "QTo", "JTo",
    ],
    Position.BB: _ALL_PAIRS + _SUITED_ACES + [
        "KQs", "KJs", "KTs", "K9s", "K8s", "K7s", "K6s", "QJs", "QTs", "JTs",
        "AKo", "AQo", "AJo", "ATo", "KQo",
    ],
}


def generate_starting_hands() -> List[str]:
    """All 169 starting-hand classes: pairs, then suited, then offsuit."""
    pairs = [rank * 2 for rank in RANKS]
    suited = [f"{high}{low}s" for idx, high in enumerate(RANKS) for low in RANKS[idx + 1 :]]
    offsuit = [f"{high}{low}o" for idx, high in enumerate(RANKS) for low in RANKS[idx + 1 :]]
    return pairs + suited + offsuit


def format_hand(cards: Sequence[Card]) -> str:
    if len(cards) != 2:
        return ""
    first, second = sorted(cards, key=lambda card: card.value, reverse=True)
    if first.rank == second.rank:
        return first.rank * 2
    return f"{first.rank}{second.rank}{'s' if first.suit == second.suit else 'o'}"


def hand_shape(notation: str) -> str:
    if len(notation) == 2:
        return PAIR
    return SUITED if notation.endswith("s") else OFFSUIT


def strength_tier(notation: str) -> str:
    for tier, hands in STRENGTH_TIERS.items():
        if notation in hands:
            return tier
    return WEAK


def default_range(position: Position) -> List[str]:
    return list(DEFAULT_RANGES.get(Position(position), []))


def in_range(cards: Sequence[Card], position: Position) -> bool:
    notation = format_hand(cards)
    return bool(notation) and notation in DEFAULT_RANGES.get(Position(position), [])


def strength_label(strength: float) -> str:
    if strength >= 0.8:
        return "Very Strong"
    if strength >= 0.65:
        return "Strong"
    if strength >= 0.5:
        return "Medium"
    if strength >= 0.35:
        return "Weak"
    return "Very Weak"
