from pathlib import Path

import pytest
from inline_snapshot import snapshot

from boggler.board import Board
from boggler.solver import Boggler, BoardSolution, parallel_solve
from boggler.trie import Trie, letter_count

TESTDATA = Path(__file__).parent.parent / "testdata"

# H E R O
# X X X I
# X X C N
# X X X E
HERO_BOARD = "heroxxxixxcnxxxe"

# C A T
# X X S
# X X X
CATS_BOARD = "catxxsxxx"
CATS_WORDS = ["cat", "cats", "sat", "act", "tax"]


def solve(board: str, words, dims=None) -> BoardSolution:
    return Boggler(Trie.create_from_wordlist(words)).solve(Board.from_string(board, dims))


def test_single_word():
    solution = solve("catx" + "x" * 12, ["cat"])
    assert solution.words == {"cat"}
    assert solution.score == letter_count("cat") == 3
    assert solution.paths == {"cat": [(0, 0), (0, 1), (0, 2)]}


def test_cats():
    solution = solve(CATS_BOARD, CATS_WORDS)
    # "act" would need to jump from C to T.
    assert solution.sorted_words() == ["cat", "cats", "sat", "tax"]
    assert solution.score == 13
    assert str(solution) == "Score: 13\nWords:\ncat\ncats\nsat\ntax"


def test_word_list_file():
    t = Trie.create_from_file(str(TESTDATA / "words.txt"))
    solution = Boggler(t).solve(Board.from_string(HERO_BOARD))
    assert solution.sorted_words() == ["her", "hero", "heroic", "heroin", "heroine"]
    assert solution.score == 3 + 4 + 6 + 6 + 7
    assert solution.paths["heroine"] == snapshot(
        [(0, 0), (0, 1), (0, 2), (0, 3), (1, 3), (2, 3), (3, 3)]
    )
    assert solution.paths["heroic"] == snapshot(
        [(0, 0), (0, 1), (0, 2), (0, 3), (1, 3), (2, 2)]
    )


def test_duplicate_paths_count_once():
    # C A
    # A T
    # "cat" can be spelled through either A.
    solution = solve("caat", ["cat"])
    assert solution.words == {"cat"}
    assert solution.score == 3
    assert solution.paths["cat"] == [(0, 0), (0, 1), (1, 1)]


def test_no_revisit():
    # A B
    # C D
    # "aba" would need to use the A twice.
    solution = solve("abcd", ["aba", "abc", "abd"])
    assert solution.sorted_words() == ["abc", "abd"]

    # A B
    # C A
    solution = solve("abca", ["aba", "abc", "abd"])
    assert solution.sorted_words() == ["aba", "abc"]


def test_no_matches():
    solution = solve("zzzz", ["cat", "dog"])
    assert solution.words == set()
    assert solution.score == 0
    assert len(solution) == 0


def test_qu_tile():
    # Qu I
    # Z  Z
    solution = solve("qizz", ["quiz", "qiz"])
    assert solution.words == {"quiz"}
    assert solution.score == 3
    assert solution.paths["quiz"] == [(0, 0), (0, 1), (1, 0)]


def test_qu_tile_is_atomic():
    # A Qu tile can't stand in for a lone "q".
    solution = solve("qatx", ["qat"])
    assert solution.words == set()


@pytest.mark.parametrize(
    "board",
    [
        # Q I Z
        # X X X
        # U X X
        "q i z x x x u x x",
        # Z I U
        # X X X
        # X X Q
        "z i u x x x x x q",
    ],
)
def test_separate_q_and_u(board):
    solution = solve(board, ["quiz"])
    assert solution.words == set()


def test_separate_q_and_u_in_order():
    # Two cells are fine if the path really goes Q -> U.
    solution = solve("q u i z", ["quiz"])
    assert solution.words == {"quiz"}
    assert solution.paths["quiz"] == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_rectangular():
    # C A T S
    # X X X X
    solution = solve("catsxxxx", ["cats", "tac"], (2, 4))
    assert solution.sorted_words() == ["cats", "tac"]


def test_solve_from():
    t = Trie.create_from_wordlist(CATS_WORDS)
    board = Board.from_string(CATS_BOARD)
    boggler = Boggler(t)
    assert boggler.solve_from(board, 0, 0).sorted_words() == ["cat", "cats"]
    assert boggler.solve_from(board, 0, 2).sorted_words() == ["tax"]
    assert boggler.solve_from(board, 2, 2).words == set()


def test_score():
    t = Trie.create_from_wordlist(CATS_WORDS)
    assert Boggler(t).score(Board.from_string(CATS_BOARD)) == 13


def test_shared_trie():
    t = Trie.create_from_wordlist(CATS_WORDS)
    board = Board.from_string(CATS_BOARD)
    a = Boggler(t).solve(board)
    b = Boggler(t).solve(board)
    assert a == b
    assert Boggler(t).solve(board).score == 13


def test_board_solution_add_word():
    solution = BoardSolution()
    assert solution.add_word("aqueous")
    assert not solution.add_word("aqueous")
    assert solution.add_word("four", [(0, 0), (0, 1), (0, 2), (0, 3)])
    assert solution.score == 10
    assert "four" in solution
    assert "aqueous" not in solution.paths
    assert solution.paths["four"] == [(0, 0), (0, 1), (0, 2), (0, 3)]


def test_board_solution_merge():
    a = BoardSolution()
    a.add_word("cat", [(0, 0), (0, 1), (0, 2)])
    a.add_word("cats")
    b = BoardSolution()
    b.add_word("cat", [(2, 2), (2, 1), (2, 0)])
    b.add_word("sat")
    a.merge(b)
    assert a.sorted_words() == ["cat", "cats", "sat"]
    assert a.score == 10
    assert a.paths["cat"] == [(0, 0), (0, 1), (0, 2)]


def test_board_solution_is_read_only():
    solution = solve(CATS_BOARD, CATS_WORDS)
    with pytest.raises(AttributeError):
        solution.words.add("dog")
    with pytest.raises(AttributeError):
        solution.score = 100
    solution.paths["cat"].append((2, 2))
    solution.paths["dog"] = [(0, 0)]
    assert solution.sorted_words() == ["cat", "cats", "sat", "tax"]
    assert solution.score == 13
    assert solution.paths["cat"] == [(0, 0), (0, 1), (0, 2)]
    assert "dog" not in solution.paths


@pytest.mark.parametrize("num_threads", [1, 2])
def test_parallel_solve(num_threads):
    t = Trie.create_from_file(str(TESTDATA / "words.txt"))
    board = Board.from_string(HERO_BOARD)
    expected = Boggler(t).solve(board)
    actual = parallel_solve(t, board, num_threads)
    assert actual.words == expected.words
    assert actual.score == expected.score
    assert actual.paths == expected.paths
