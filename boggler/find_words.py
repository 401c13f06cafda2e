#!/usr/bin/env python
"""Generate a random Boggle board, and optionally find all the words on it."""

import argparse
import sys

from boggler.args import (
    add_standard_args,
    get_board_from_args,
    get_trie_from_args,
)
from boggler.solver import parallel_solve
from boggler.trie import DictionaryUnavailable


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="boggler",
        description="Generates and optionally solves a random Boggle board",
    )
    add_standard_args(parser, random_seed=True, num_threads=True)
    parser.add_argument(
        "board",
        nargs="?",
        help="Solve this board instead of rolling one, e.g. 'abcdefghijklmnop'. "
        "Separate tiles with spaces to use a lone 'q'. Set --size for non-4x4 boards.",
    )
    parser.add_argument(
        "-s",
        "--solve",
        action="store_true",
        help="Solve the board?",
    )
    args = parser.parse_args(argv)

    try:
        board = get_board_from_args(args)
    except ValueError as e:
        parser.error(str(e))
    print(board)
    if not args.solve:
        return 0

    try:
        trie = get_trie_from_args(args)
    except DictionaryUnavailable as e:
        sys.stderr.write(f"{e}\n")
        sys.stderr.write("Error initializing solver--check wordlist\n")
        return 1

    solution = parallel_solve(trie, board, args.num_threads)
    print()
    print(solution)
    return 0


if __name__ == "__main__":
    sys.exit(main())
