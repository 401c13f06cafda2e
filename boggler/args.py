"""Standard command-line arguments share across the boggler tools."""

import argparse
import random

from boggler.board import Board
from boggler.dice import roll_board
from boggler.trie import Trie

DEFAULT_DICTIONARY = "/usr/share/dict/american-english"


def add_standard_args(
    parser: argparse.ArgumentParser, *, random_seed=False, num_threads=False
):
    parser.add_argument(
        "--size",
        type=int,
        choices=(22, 23, 33, 34, 44, 45, 55),
        default=44,
        help="Size of the boggle board, rows then columns.",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default=DEFAULT_DICTIONARY,
        help="Path to dictionary file with one word per line.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )
    if num_threads:
        parser.add_argument(
            "--num_threads",
            type=int,
            default=1,
            help="Number of worker processes to spread the search across.",
        )


def get_dims_from_args(args: argparse.Namespace) -> tuple[int, int]:
    return args.size // 10, args.size % 10


def get_rng_from_args(args: argparse.Namespace) -> random.Random:
    if args.random_seed >= 0:
        return random.Random(args.random_seed)
    return random.Random()


def get_board_from_args(args: argparse.Namespace) -> Board:
    """Parse args.board if it was given, otherwise roll a new one."""
    dims = get_dims_from_args(args)
    if args.board:
        return Board.from_string(args.board, dims)
    return roll_board(dims, rng=get_rng_from_args(args))


def get_trie_from_args(args: argparse.Namespace) -> Trie:
    return Trie.create_from_file(args.dictionary)
