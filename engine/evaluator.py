from __future__ import annotations

import itertools
from collections import Counter
from typing import Dict, List, Optional, Sequence

from .cards import Card, SUITS
from .models import EvaluatedHand, HandCategory

# Score layout: category * CATEGORY_BAND + tie-break ranks packed as base-15
# digits, most significant first. Five digits top out at 15**5 - 1, which
# keeps every tie-break inside its own band.
CATEGORY_BAND = 1_000_000
ROYAL_FLUSH_SCORE = HandCategory.ROYAL_FLUSH * CATEGORY_BAND
_DIGIT_BASE = 15
_WHEEL = (14, 5, 4, 3, 2)


def evaluate_hand(cards: Sequence[Card]) -> EvaluatedHand:
    """Score five or more cards. Higher is better.

    Six and seven card sets score the same as their best five-card subset,
    so callers that only need the score can skip :func:`get_best_hand`.
    """
    if len(cards) < 5:
        return EvaluatedHand(category=None, score=0)

    counts = Counter(card.value for card in cards)
    # Ranks ordered by value, high to low; used for every kicker lookup.
    ranks = sorted(counts, reverse=True)

    flush_values = _flush_values(cards)
    if flush_values is not None:
        straight_top = _straight_top(flush_values)
        if straight_top == 14:
            return EvaluatedHand(HandCategory.ROYAL_FLUSH, ROYAL_FLUSH_SCORE)
        if straight_top is not None:
            return _scored(HandCategory.STRAIGHT_FLUSH, [straight_top])

    quads = [rank for rank in ranks if counts[rank] >= 4]
    if quads:
        kicker = max(rank for rank in ranks if rank != quads[0])
        return _scored(HandCategory.FOUR_OF_A_KIND, [quads[0], kicker])

    trips = [rank for rank in ranks if counts[rank] == 3]
    if trips:
        pair = next((rank for rank in ranks if rank != trips[0] and counts[rank] >= 2), None)
        if pair is not None:
            return _scored(HandCategory.FULL_HOUSE, [trips[0], pair])

    if flush_values is not None:
        return _scored(HandCategory.FLUSH, flush_values[:5])

    straight_top = _straight_top(ranks)
    if straight_top is not None:
        return _scored(HandCategory.STRAIGHT, [straight_top])

    if trips:
        kickers = [rank for rank in ranks if rank != trips[0]][:2]
        return _scored(HandCategory.THREE_OF_A_KIND, [trips[0]] + kickers)

    pairs = [rank for rank in ranks if counts[rank] == 2]
    if len(pairs) >= 2:
        high, low = pairs[0], pairs[1]
        # A third pair can supply the kicker.
        kicker = max(rank for rank in ranks if rank not in (high, low))
        return _scored(HandCategory.TWO_PAIR, [high, low, kicker])
    if pairs:
        kickers = [rank for rank in ranks if rank != pairs[0]][:3]
        return _scored(HandCategory.ONE_PAIR, [pairs[0]] + kickers)

    return _scored(HandCategory.HIGH_CARD, ranks[:5])


def get_best_hand(cards: Sequence[Card]) -> List[Card]:
    """Return the highest-scoring five-card subset by trying all of them."""
    if len(cards) <= 5:
        return list(cards)

    best: Optional[List[Card]] = None
    best_score = -1
    for combo in itertools.combinations(cards, 5):
        score = evaluate_hand(combo).score
        if score > best_score:
            best_score = score
            best = list(combo)
    assert best is not None
    return best


def encode_ranks(ranks: Sequence[int]) -> int:
    value = 0
    for rank in ranks:
        value = value * _DIGIT_BASE + rank
    return value


def _scored(category: HandCategory, tiebreak: Sequence[int]) -> EvaluatedHand:
    return EvaluatedHand(category, category * CATEGORY_BAND + encode_ranks(tiebreak))


def _flush_values(cards: Sequence[Card]) -> Optional[List[int]]:
    """Descending ranks of the flush suit, or None when no suit has five cards."""
    by_suit: Dict[str, List[int]] = {suit: [] for suit in SUITS}
    for card in cards:
        by_suit[card.suit].append(card.value)

    candidates = [sorted(values, reverse=True) for values in by_suit.values() if len(values) >= 5]
    if not candidates:
        return None
    # Only reachable with ten or more cards: prefer a straight flush, then the top card.
    candidates.sort(key=lambda values: (_straight_top(values) or 0, values), reverse=True)
    return candidates[0]


def _straight_top(values: Sequence[int]) -> Optional[int]:
    distinct = sorted(set(values), reverse=True)
    for idx in range(len(distinct) - 4):
        if distinct[idx] - distinct[idx + 4] == 4:
            return distinct[idx]
    if all(rank in distinct for rank in _WHEEL):
        return 5
    return None
