"""Command line entry point: shows a freshly shuffled deck."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from nobridge.deck import Deck


def main(argv: Sequence[str] | None = None) -> int:
    """Print a shuffled deck and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="nobridge", description="Bridge robot: show a shuffled deck."
    )
    parser.parse_args(argv)
    Deck().print()
    return 0