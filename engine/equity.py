"""Monte Carlo equity for one player against a known or random opponent."""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence

from .cards import Card, build_remaining_deck, shuffle
from .evaluator import evaluate_hand
from .models import EquityResult

LOGGER = logging.getLogger("poker_engine.equity")

BOARD_SIZE = 5


class EquitySimulator:
    """Accumulates win/loss/tie counters across any number of batches.

    The simulator only ever consumes ``rng`` one shuffle per iteration, so
    for a seeded generator the totals do not depend on how the iterations
    are split into batches.
    """

    def __init__(
        self,
        player_cards: Sequence[Card],
        opponent_cards: Sequence[Card],
        community_cards: Sequence[Card],
        rng: Optional[random.Random] = None,
    ) -> None:
        self.player_cards = list(player_cards)
        self.known_opponent: Optional[List[Card]] = list(opponent_cards) if len(opponent_cards) == 2 else None
        self.community_cards = list(community_cards)
        self.rng = rng or random.Random()

        used = self.player_cards + self.community_cards + (self.known_opponent or [])
        self.remaining_deck = build_remaining_deck(used)
        self.board_needed = max(0, BOARD_SIZE - len(self.community_cards))

        self.wins = 0
        self.losses = 0
        self.ties = 0

    @property
    def completed(self) -> int:
        return self.wins + self.losses + self.ties

    def run(self, iterations: int) -> None:
        for _ in range(iterations):
            self._run_once()

    def result(self) -> EquityResult:
        return EquityResult(wins=self.wins, losses=self.losses, ties=self.ties, iterations=self.completed)

    def _run_once(self) -> None:
        deck = shuffle(self.remaining_deck, self.rng)
        if self.known_opponent is not None:
            opponent = self.known_opponent
            drawn = 0
        else:
            opponent = deck[:2]
            drawn = 2
        board = self.community_cards + deck[drawn : drawn + self.board_needed]

        player_score = evaluate_hand(self.player_cards + board).score
        opponent_score = evaluate_hand(opponent + board).score
        if player_score > opponent_score:
            self.wins += 1
        elif opponent_score > player_score:
            self.losses += 1
        else:
            self.ties += 1


def calculate_equity(
    player_cards: Sequence[Card],
    opponent_cards: Sequence[Card],
    community_cards: Sequence[Card],
    iterations: int = 1_000,
    *,
    rng: Optional[random.Random] = None,
    batch_size: Optional[int] = None,
    on_progress: Optional[Callable[[EquityResult], None]] = None,
    should_stop: Optional[Callable[[], bool]] = None,
) -> EquityResult:
    """Estimate player, opponent and tie equity by sampling runouts.

    Anything other than exactly two player cards (or a non-positive
    iteration count) yields an all-zero result instead of an error.
    Opponent cards count as known only when exactly two are given;
    otherwise the opponent's hand is re-dealt every iteration.

    With ``batch_size`` set, ``on_progress`` is called with the running
    totals after every batch and ``should_stop`` is polled between batches;
    a stop request returns the partial result.
    """
    if len(player_cards) != 2 or iterations <= 0:
        return EquityResult()

    simulator = EquitySimulator(player_cards, opponent_cards, community_cards, rng=rng)
    step = iterations if not batch_size or batch_size <= 0 else batch_size

    while simulator.completed < iterations:
        if should_stop is not None and should_stop():
            LOGGER.debug("Equity run stopped after %s of %s iterations", simulator.completed, iterations)
            break
        simulator.run(min(step, iterations - simulator.completed))
        if on_progress is not None:
            on_progress(simulator.result())

    result = simulator.result()
    LOGGER.debug(
        "Equity %s vs %s on [%s]: %.4f/%.4f/%.4f over %s iterations",
        " ".join(card.label for card in player_cards),
        " ".join(card.label for card in simulator.known_opponent) if simulator.known_opponent else "random",
        " ".join(card.label for card in community_cards),
        result.player_equity,
        result.opponent_equity,
        result.tie_equity,
        result.iterations,
    )
    return result
