"""Find all the words on a Boggle board by walking the board and a Trie together."""

import multiprocessing

from boggler.board import Board
from boggler.trie import Trie, TrieNode, letter_count


class BoardSolution:
    """The distinct words found on a board and their total score.

    Words only go in through add_word() or merge(), so the score is always the
    sum of their letter counts.
    """

    _words: set[str]
    _score: int
    _paths: dict[str, list[tuple[int, int]]]

    def __init__(self):
        self._words = set()
        self._score = 0
        # First path of (row, col) cells found for each word.
        self._paths = {}

    @property
    def words(self) -> frozenset[str]:
        return frozenset(self._words)

    @property
    def score(self) -> int:
        return self._score

    @property
    def paths(self) -> dict[str, list[tuple[int, int]]]:
        return {word: [*path] for word, path in self._paths.items()}

    def add_word(self, word: str, path: list[tuple[int, int]] | None = None) -> bool:
        if word in self._words:
            return False
        self._words.add(word)
        self._score += letter_count(word)
        if path is not None:
            self._paths[word] = [*path]
        return True

    def merge(self, other: "BoardSolution"):
        for word in sorted(other._words):
            self.add_word(word, other._paths.get(word))

    def sorted_words(self) -> list[str]:
        return sorted(self._words)

    def __len__(self):
        return len(self._words)

    def __contains__(self, word: str):
        return word in self._words

    def __eq__(self, other):
        return (
            isinstance(other, BoardSolution)
            and self._words == other._words
            and self._paths == other._paths
        )

    def __repr__(self):
        return f"BoardSolution(score={self._score}, words={self.sorted_words()!r})"

    def __str__(self):
        lines = [f"Score: {self._score}", "Words:", *self.sorted_words()]
        return "\n".join(lines)


class Boggler:
    """Depth-first search over a board, pruned by a read-only Trie.

    A single Trie can be shared by any number of Bogglers.
    """

    _trie: Trie

    def __init__(self, trie: Trie):
        self._trie = trie
        assert not self._trie.root.is_word()

    def solve(self, board: Board) -> BoardSolution:
        solution = BoardSolution()
        for i in range(board.rows * board.cols):
            self._solve_cell(board, i, solution)
        return solution

    def solve_from(self, board: Board, row: int, col: int) -> BoardSolution:
        """Only the words whose paths start at (row, col)."""
        solution = BoardSolution()
        self._solve_cell(board, board.index(row, col), solution)
        return solution

    def score(self, board: Board) -> int:
        return self.solve(board).score

    def _solve_cell(self, board: Board, i: int, solution: BoardSolution):
        cells = board.cells()
        d = self._trie.descend(self._trie.root, cells[i])
        if d:
            used = [False] * len(cells)
            neighbors = board.adjacency()
            self._dfs(board, cells, neighbors, i, d, used, [], solution)

    def _dfs(
        self,
        board: Board,
        cells: list[str],
        neighbors: tuple[tuple[int, ...], ...],
        i: int,
        t: TrieNode,
        used: list[bool],
        seq: list[int],
        solution: BoardSolution,
    ):
        used[i] = True
        seq.append(i)
        try:
            if t.word is not None and t.word not in solution:
                solution.add_word(t.word, [board.position(idx) for idx in seq])

            for idx in neighbors[i]:
                if used[idx]:
                    continue
                # A Qu tile has to match both edges; a lone "q" is no good.
                d = self._trie.descend(t, cells[idx])
                if d:
                    self._dfs(board, cells, neighbors, idx, d, used, seq, solution)
        finally:
            seq.pop()
            used[i] = False


def _solve_init(trie: Trie, board: Board):
    _solve_start.boggler = Boggler(trie)
    _solve_start.board = board


def _solve_start(i: int) -> BoardSolution:
    board = _solve_start.board
    row, col = board.position(i)
    return _solve_start.boggler.solve_from(board, row, col)


def parallel_solve(trie: Trie, board: Board, num_threads: int) -> BoardSolution:
    """Solve a board, spreading the starting cells across worker processes.

    Each worker has its own visited set and partial solution; these are merged
    at the end so each word is only scored once.
    """
    if num_threads <= 1:
        return Boggler(trie).solve(board)
    solution = BoardSolution()
    starts = [*range(board.rows * board.cols)]
    with multiprocessing.Pool(num_threads, _solve_init, (trie, board)) as pool:
        # imap (not imap_unordered) keeps the first-found paths deterministic.
        for partial in pool.imap(_solve_start, starts):
            solution.merge(partial)
    return solution
