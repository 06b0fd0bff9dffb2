"""Main entry point for the Taiga decision core.

This module provides two commands:
- serve (default): FastAPI decision service
- decide <snapshot.json>: evaluate one JSON snapshot and print the decision
"""

import argparse
import json
import logging
import random
import sys

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)


def run_web_server():
    """Run the decision service."""
    from taiga.config.server import DEFAULT_API_PORT

    try:
        import uvicorn

        from taiga_backend.main import app

        logger.info("Starting Taiga decision service...")
        logger.info("API docs available at http://localhost:%d/docs", DEFAULT_API_PORT)
        uvicorn.run(app, host="0.0.0.0", port=DEFAULT_API_PORT)
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .")
        sys.exit(1)


def run_decide(path: str, species: str, seed=None) -> dict:
    """Decide once for the snapshot stored in ``path``.

    The file holds the same JSON body the decision API accepts.

    Args:
        path: JSON snapshot file
        species: Species of the deciding agent
        seed: Optional random seed for deterministic tie-breaking

    Returns:
        Dictionary with the best positions, direction and food choice
    """
    from taiga.ai import ai_for, best_positions
    from taiga.entities import Species
    from taiga_backend.models import SnapshotRequest

    with open(path, encoding="utf-8") as handle:
        request = SnapshotRequest.model_validate(json.load(handle))

    resolved = Species(species)
    engine = ai_for(resolved, rng=random.Random(seed))
    agent = request.agent.to_agent(resolved)
    visibility = request.to_visibility()

    values = engine.evaluate(agent, visibility)
    direction = engine.move(agent, visibility)
    food = engine.feed(agent, visibility)
    return {
        "best": [[p.x, p.y] for p in best_positions(values)],
        "direction": direction.name if direction else None,
        "food": repr(food) if food is not None else None,
    }


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser with its ``serve`` and ``decide`` commands."""
    parser = argparse.ArgumentParser(
        description="Taiga predator/prey decision core",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the decision service (default)
  python main.py serve

  # Decide for a rabbit from a snapshot file
  python main.py decide snapshot.json --species rabbit --seed 42
        """,
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("serve", help="Run the decision service")

    decide_parser = subparsers.add_parser("decide", help="Decide for a JSON snapshot")
    decide_parser.add_argument("snapshot", help="JSON snapshot file")
    decide_parser.add_argument(
        "--species",
        choices=("wolf", "rabbit"),
        default="rabbit",
        help="Species of the deciding agent (default: rabbit)",
    )
    decide_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    return parser


def main(argv=None):
    """Parse command-line arguments and run the appropriate mode."""
    args = build_parser().parse_args(argv)

    if args.command == "decide":
        result = run_decide(args.snapshot, args.species, seed=args.seed)
        print(json.dumps(result, indent=2))
    else:
        run_web_server()


if __name__ == "__main__":
    main()
