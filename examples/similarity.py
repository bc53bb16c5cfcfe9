#!/usr/bin/env python3
"""Print the trigram similarity of two strings.

Usage:
    python examples/similarity.py string1 string2
"""

import sys

import trigram as tg


def main(argv: list) -> int:
    if len(argv) != 1 + 2:
        print("usage: similarity string1 string2", file=sys.stderr)
        return 1
    print(tg.similarity(argv[1], argv[2]))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
