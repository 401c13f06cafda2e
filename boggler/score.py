#!/usr/bin/env python
"""Score boggle boards."""

import argparse
import fileinput
import sys
import time

from boggler.args import add_standard_args, get_dims_from_args, get_trie_from_args
from boggler.board import Board
from boggler.solver import Boggler


def main(argv=None):
    parser = argparse.ArgumentParser(description="Score boggle boards")
    add_standard_args(parser)
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Files containing boards, or stdin"
    )
    parser.add_argument(
        "--print_words",
        action="store_true",
        help="Print all the words that can be found on each board.",
    )

    args = parser.parse_args(argv)
    dims = get_dims_from_args(args)
    boggler = Boggler(get_trie_from_args(args))

    start_s = time.time()
    n = 0
    for line in fileinput.input(files=args.files):
        text = line.strip()
        if not text:
            continue
        solution = boggler.solve(Board.from_string(text, dims))
        print(f"{text}: {solution.score}")
        if args.print_words:
            print("\n".join(solution.sorted_words()))
        n += 1
    end_s = time.time()
    elapsed_s = end_s - start_s
    rate = n / elapsed_s if elapsed_s else 0.0
    sys.stderr.write(f"{n} boards in {elapsed_s:.2f}s = {rate:.2f} boards/s\n")


if __name__ == "__main__":
    main()
