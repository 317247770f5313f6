import random
from collections import Counter

import pytest

from engine.cards import (
    Card,
    build_remaining_deck,
    cards_to_labels,
    find_duplicates,
    full_deck,
    parse_label,
    shuffle,
)

from .helpers import cards


def test_full_deck_has_52_unique_cards():
    deck = full_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52


def test_remaining_deck_excludes_used_cards():
    used = cards("As Ah Kd 2c 7h")
    remaining = build_remaining_deck(used)

    assert len(remaining) == 47
    assert not set(used) & set(remaining)


def test_shuffle_returns_permutation_and_leaves_input_alone():
    deck = full_deck()
    original = list(deck)

    shuffled = shuffle(deck, random.Random(3))

    assert deck == original
    assert sorted(shuffled, key=lambda c: c.label) == sorted(original, key=lambda c: c.label)


def test_shuffle_is_reproducible_with_seeded_rng():
    deck = full_deck()
    assert shuffle(deck, random.Random(99)) == shuffle(deck, random.Random(99))


def test_shuffle_spreads_orderings_evenly():
    rng = random.Random(2024)
    deck = cards("As Kd 7c")
    counts = Counter(tuple(cards_to_labels(shuffle(deck, rng))) for _ in range(6_000))

    # 3! orderings, 1000 expected each.
    assert len(counts) == 6
    assert all(850 < count < 1150 for count in counts.values())


def test_parse_label_accepts_common_spellings():
    assert parse_label("As") == Card("A", "s")
    assert parse_label("th") == Card("T", "h")
    assert parse_label("10d") == Card("T", "d")
    assert parse_label("K♣") == Card("K", "c")
    assert parse_label("Qspades") == Card("Q", "s")


def test_card_validation_rejects_invalid_labels():
    with pytest.raises(ValueError, match="Invalid rank"):
        Card("1", "h")
    with pytest.raises(ValueError, match="Invalid suit"):
        Card("A", "x")
    with pytest.raises(ValueError, match="Invalid card label"):
        parse_label("")


def test_find_duplicates_spans_all_slots():
    player = cards("As Ah")
    opponent = cards("Kd As")
    board = cards("2c 3c Kd")

    duplicates = find_duplicates(player, opponent, board)

    assert set(duplicates) == {Card("A", "s"), Card("K", "d")}
    assert find_duplicates(cards("As Ah"), cards("Kd Kc")) == []
