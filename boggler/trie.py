from typing import Iterable, Iterator, Self

LETTER_A = ord("a")

# A word shorter than this isn't a Boggle word; a longer one can't fit on
# a 4x4 board even using every Qu.
MIN_LETTERS = 3
MAX_LETTERS = 16


class DictionaryUnavailable(OSError):
    """The word list could not be read."""


def to_idx(letter: str) -> int | None:
    if len(letter) != 1 or not ("a" <= letter <= "z"):
        return None
    return ord(letter) - LETTER_A


def letter_count(word: str) -> int:
    """Number of letters in a word, counting "qu" as one.

    This is both the length used to filter the dictionary and the number of
    points a word is worth.
    """
    count = 0
    prev_q = False
    for c in word:
        if c == "q":
            count += 1
            prev_q = True
        else:
            if not (c == "u" and prev_q):
                count += 1
            prev_q = False
    return count


def prepare_word(word: str) -> str | None:
    """Normalize a raw word list entry, or None if it can't be played."""
    word = word.strip().lower()
    if not word.isascii() or not word.isalpha():
        return None
    if not MIN_LETTERS <= letter_count(word) <= MAX_LETTERS:
        return None
    return word


class TrieNode:
    _children: list[Self | None]
    word: str | None

    def __init__(self):
        self._children = [None] * 26
        self.word = None

    def has_child(self, letter: str) -> bool:
        i = to_idx(letter)
        return i is not None and self._children[i] is not None

    def child(self, letter: str) -> Self | None:
        i = to_idx(letter)
        if i is None:
            return None
        return self._children[i]

    def is_word(self) -> bool:
        return self.word is not None

    def children(self) -> Iterator[tuple[str, Self]]:
        for i, child in enumerate(self._children):
            if child:
                yield chr(i + LETTER_A), child

    # ---

    def add_child(self, letter: str) -> Self:
        i = to_idx(letter)
        assert i is not None, letter
        if self._children[i] is None:
            self._children[i] = TrieNode()
        return self._children[i]

    def size(self) -> int:
        return (1 if self.is_word() else 0) + sum(c.size() for _, c in self.children())

    def num_nodes(self) -> int:
        return 1 + sum(c.num_nodes() for _, c in self.children())


class Trie:
    """A dictionary of Boggle words, stored as a prefix tree of letters."""

    root: TrieNode

    def __init__(self):
        self.root = TrieNode()

    def insert(self, word: str) -> bool:
        """Add a raw word. Returns False if it isn't a valid Boggle word."""
        prepared = prepare_word(word)
        if prepared is None:
            return False
        node = self.root
        for letter in prepared:
            node = node.add_child(letter)
        node.word = prepared
        return True

    def find(self, word: str) -> str | None:
        node = self.descend(self.root, word)
        if node is None or node.word != word:
            return None
        return node.word

    @staticmethod
    def has_child_edge(node: TrieNode, letter: str) -> bool:
        return node.has_child(letter)

    @staticmethod
    def descend(node: TrieNode, letters: str) -> TrieNode | None:
        """Follow one edge per letter, e.g. both "q" and "u" for a Qu tile."""
        for letter in letters:
            node = node.child(letter)
            if node is None:
                return None
        return node

    def words(self) -> Iterator[str]:
        """All words, in alphabetical order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.word is not None:
                yield node.word
            stack.extend(child for _, child in reversed([*node.children()]))

    def size(self) -> int:
        return self.root.size()

    def num_nodes(self) -> int:
        return self.root.num_nodes()

    def __len__(self):
        return self.size()

    def __contains__(self, word: str):
        return self.find(word) is not None

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> "Trie":
        trie = Trie()
        for word in words:
            trie.insert(word)
        return trie

    @staticmethod
    def create_from_file(path: str) -> "Trie":
        """Load a newline-delimited word list.

        Raises DictionaryUnavailable if the file can't be read, so that a
        missing dictionary is never confused with one that has no words.
        """
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                return Trie.create_from_wordlist(f)
        except OSError as e:
            raise DictionaryUnavailable(f"Unable to read word list {path}: {e}") from e
