import random
from concurrent.futures import ThreadPoolExecutor

from engine.equity import calculate_equity
from engine.evaluator import evaluate_hand

from .helpers import cards, random_hand


def test_concurrent_equity_runs_match_sequential_runs():
    spots = [
        (cards("As Ah"), cards("Ks Kh"), []),
        (cards("7h 6h"), [], cards("5h 4c Kd")),
        (cards("Qc Jc"), cards("Ad 2d"), cards("Tc 9s 2h 3c")),
        (cards("8s 8d"), [], []),
    ]

    def run(seed_and_spot):
        seed, (player, opponent, board) = seed_and_spot
        return calculate_equity(player, opponent, board, 1_500, rng=random.Random(seed))

    jobs = list(enumerate(spots * 3))
    sequential = [run(job) for job in jobs]
    with ThreadPoolExecutor(max_workers=4) as pool:
        concurrent = list(pool.map(run, jobs))

    assert concurrent == sequential


def test_evaluator_handles_ten_thousand_random_hands():
    rng = random.Random(1_000)
    for _ in range(10_000):
        hand = evaluate_hand(random_hand(rng, 7))
        assert hand.category is not None
        assert 0 < hand.score <= 9_000_000
