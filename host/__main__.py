import argparse
import asyncio
import logging

from engine.models import SolverConfig
from .server import SolverServer


def main() -> None:
    # Defaults mirror SolverConfig; every flag is optional.
    defaults = SolverConfig()
    parser = argparse.ArgumentParser(description="Poker equity solver host")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--equity-iterations", type=int, default=defaults.default_equity_iterations)
    parser.add_argument("--solver-iterations", type=int, default=defaults.default_solver_iterations)
    parser.add_argument("--min-iterations", type=int, default=defaults.min_iterations)
    parser.add_argument("--max-iterations", type=int, default=defaults.max_iterations)
    parser.add_argument(
        "--batch-size",
        type=int,
        default=defaults.batch_size,
        help="Iterations per equity batch (shutdown is checked between batches)",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    config = SolverConfig(
        default_equity_iterations=args.equity_iterations,
        default_solver_iterations=args.solver_iterations,
        min_iterations=args.min_iterations,
        max_iterations=args.max_iterations,
        batch_size=args.batch_size,
    )

    server = SolverServer(config)
    try:
        asyncio.run(server.start(host=args.host, port=args.port))
    except KeyboardInterrupt:
        logging.getLogger("solver_host").info("Solver host stopped")


if __name__ == "__main__":
    main()
