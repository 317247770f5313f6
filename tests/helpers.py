from __future__ import annotations

import random
from typing import List

from engine.cards import Card, full_deck, parse_cards


def cards(text: str) -> List[Card]:
    """Build cards from a space separated label string, e.g. ``"As Kh Td"``."""
    return parse_cards(text.split())


def random_hand(rng: random.Random, size: int = 7) -> List[Card]:
    return rng.sample(full_deck(), size)
