#!/usr/bin/env python
"""I/O-free performance test.

$ python -m boggler.perf --size 44 1000 --random_seed 808813
"""

import argparse
import time

from tqdm import tqdm

from boggler.args import (
    add_standard_args,
    get_dims_from_args,
    get_rng_from_args,
    get_trie_from_args,
)
from boggler.dice import roll_board
from boggler.solver import Boggler


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="Boggler perf test",
        description="Measure the speed of board evaluation, free from I/O.",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "num_boards",
        type=int,
        help="Number of boards to evaluate",
        default=1_000,
        nargs="?",
    )
    args = parser.parse_args(argv)
    rng = get_rng_from_args(args)

    n = args.num_boards
    dims = get_dims_from_args(args)
    boggler = Boggler(get_trie_from_args(args))

    rows, cols = dims
    print(f"Rolling {n} {rows}x{cols} boards...")
    boards = [roll_board(dims, rng=rng) for _ in range(n)]

    total_score = 0
    print("Scoring boards...")
    start_s = time.time()
    for board in tqdm(boards, smoothing=0):
        total_score += boggler.score(board)
    end_s = time.time()

    elapsed_s = end_s - start_s
    pace = len(boards) / elapsed_s if elapsed_s else 0.0

    print(f"{total_score=}")
    print(f"{elapsed_s:.02f}s, {pace:.02f} bds/sec")


if __name__ == "__main__":
    main()
