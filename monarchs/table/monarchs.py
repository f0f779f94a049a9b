"""
Monarchs table command-line interface.

Play at the table from the console, or print the exact paytable analysis.
"""

import argparse
import asyncio
import logging
from typing import List, Optional

from monarchs.adapters import CLIAdapter
from monarchs.common.shoe import DEFAULT_NUM_DECKS
from monarchs.engine import TableEngine
from monarchs.table.constants import STARTING_BALANCE

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


async def play(num_decks: int, balance: int, seed: Optional[int]) -> int:
    """
    Run an interactive session until the player quits.

    Returns:
        The final balance
    """
    engine = TableEngine(
        CLIAdapter(),
        {"num_decks": num_decks, "starting_balance": balance, "seed": seed},
    )
    await engine.initialize()
    try:
        state = await engine.play()
    finally:
        await engine.shutdown()
    return state.balance


def show_paytable(num_decks: int) -> None:
    """Print the expected return of each spot for a fresh shoe."""
    from monarchs.analysis import paytable_report

    report = paytable_report(num_decks)
    print(f"\nMonarchs paytable, {num_decks} decks")
    print("=" * 70)
    print(
        report.to_string(
            formatters={
                "expected_return": "{:.4f}".format,
                "house_edge": "{:.2%}".format,
                "hit_frequency": "{:.2%}".format,
            }
        )
    )
    print("=" * 70)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI interface for the Monarchs table."""
    parser = argparse.ArgumentParser(
        description="Monarchs side-bet card table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sit down at a six-deck table
  monarchs

  # Show expected returns for an eight-deck shoe
  monarchs --paytable --num_decks 8
        """,
    )

    parser.add_argument(
        "--paytable",
        action="store_true",
        help="Print the exact expected return of every spot and exit",
    )

    parser.add_argument(
        "--num_decks",
        type=int,
        default=DEFAULT_NUM_DECKS,
        help=f"Number of decks in the shoe (default: {DEFAULT_NUM_DECKS})",
    )

    parser.add_argument(
        "--balance",
        type=int,
        default=STARTING_BALANCE,
        help=f"Starting balance (default: {STARTING_BALANCE})",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the shuffle for a reproducible session",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if args.paytable:
        show_paytable(args.num_decks)
        return

    final_balance = asyncio.run(play(args.num_decks, args.balance, args.seed))
    print(f"Final balance: ${final_balance}")


if __name__ == "__main__":
    main()
