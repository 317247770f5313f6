from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

RANKS = "AKQJT98765432"
SUITS = "shdc"
RANK_VALUE = {rank: idx for idx, rank in enumerate(RANKS[::-1], start=2)}
SUIT_NAMES = {"s": "spades", "h": "hearts", "d": "diamonds", "c": "clubs"}

# Extra spellings accepted by parse_label on top of the single-letter forms.
_SUIT_ALIASES = {name: letter for letter, name in SUIT_NAMES.items()}
_SUIT_ALIASES.update({"♠": "s", "♥": "h", "♦": "d", "♣": "c"})


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def value(self) -> int:
        return RANK_VALUE[self.rank]

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"

    def __str__(self) -> str:
        return self.label


def full_deck() -> List[Card]:
    return [Card(rank, suit) for suit in SUITS for rank in RANKS]


def build_remaining_deck(used_cards: Iterable[Card]) -> List[Card]:
    """Return the 52-card deck minus every card already in play."""
    used = set(used_cards)
    return [card for card in full_deck() if card not in used]


def shuffle(cards: Sequence[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """Fisher-Yates shuffle of a copy of ``cards``; the input is left untouched."""
    rng = rng or random.Random()
    result = list(cards)
    for idx in range(len(result) - 1, 0, -1):
        swap = rng.randrange(idx + 1)
        result[idx], result[swap] = result[swap], result[idx]
    return result


def find_duplicates(*groups: Iterable[Card]) -> List[Card]:
    """Cards assigned to more than one slot across all the given groups."""
    counts = Counter(card for group in groups for card in group)
    return [card for card, count in counts.items() if count > 1]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    text = label.strip()
    if text[:2] == "10":
        rank, suit = "T", text[2:]
    else:
        rank, suit = text[:1].upper(), text[1:]
    suit = _SUIT_ALIASES.get(suit.lower(), suit.lower())
    if not rank or len(suit) != 1:
        raise ValueError(f"Invalid card label: {label}")
    return Card(rank, suit)


def parse_cards(labels: Iterable[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
