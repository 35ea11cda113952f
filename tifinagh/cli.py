"""Command-line entry point for Tifinagh transliteration."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from tifinagh.transliterate import transliterate

__all__ = ["main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the Tifinagh transliteration of the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Provide text to transliterate to Tifinagh")
        return 0

    print(transliterate(args[0]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())