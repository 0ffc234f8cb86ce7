"""A word list backed by a compact DAWG and a sorted set of added words."""

from __future__ import annotations

import bisect
import heapq
import re
import struct
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from os import PathLike

from cslib.startup import ErrorException

_MAGIC = b"DAWG"
_NUMBER_RE = re.compile(rb"\s*([+-]?\d+)")
_EDGE_SIZE = 4


class LexiconError(ErrorException):
    """Raised when a lexicon file cannot be opened or is malformed."""


@dataclass(frozen=True)
class _Edge:
    letter: int
    last_edge: bool
    accept: bool
    children: int

    @classmethod
    def decode(cls, word: int) -> _Edge:
        return cls(
            letter=word & 0x1F,
            last_edge=bool(word >> 5 & 1),
            accept=bool(word >> 6 & 1),
            children=word >> 8,
        )


def _char_to_ord(ch: str) -> int:
    return ord(ch.lower()) - ord("a") + 1


def _ord_to_char(value: int) -> str:
    return chr(value - 1 + ord("a"))


class Lexicon:
    """A case-insensitive word list with word and prefix lookup.

    Words are stored in lower case and iterated in alphabetical order.
    A lexicon may be loaded from a text file with one word per line or
    from a precompiled binary DAWG file.
    """

    def __init__(self, filename: str | PathLike[str] | None = None) -> None:
        self._edges: list[_Edge] = []
        self._start: int | None = None
        self._dawg_count = 0
        self._other_words: list[str] = []
        if filename is not None:
            self.add_words_from_file(filename)

    # Loading

    def add_words_from_file(self, filename: str | PathLike[str]) -> None:
        """Add every word of a text file, or load a binary DAWG file."""
        try:
            with open(filename, "rb") as stream:
                data = stream.read()
        except OSError:
            raise LexiconError(f"Couldn't open lexicon file {filename}") from None
        if data[:4] == _MAGIC:
            if self._other_words:
                raise LexiconError("Binary files require an empty lexicon")
            self._read_binary(data, str(filename))
            return
        lines = data.decode("utf-8", errors="replace").split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for line in lines:
            self.add(line)

    def _read_binary(self, data: bytes, filename: str) -> None:
        malformed = LexiconError(f"Improperly formed lexicon file {filename}")
        pos = 5  # magic plus one separator byte
        match = _NUMBER_RE.match(data, pos)
        if match is None:
            raise malformed
        start_index = int(match.group(1))
        pos = match.end() + 1
        match = _NUMBER_RE.match(data, pos)
        if match is None:
            raise malformed
        num_bytes = int(match.group(1))
        pos = match.end() + 1
        if start_index < 0 or num_bytes < 0:
            raise malformed
        num_edges = num_bytes // _EDGE_SIZE
        chunk = data[pos:pos + num_edges * _EDGE_SIZE]
        if len(chunk) < num_edges * _EDGE_SIZE:
            raise malformed
        edges = [
            _Edge.decode(word)
            for (word,) in struct.iter_unpack(">I", chunk)
        ]
        if not edges:
            self._edges, self._start, self._dawg_count = [], None, 0
            return
        if start_index >= len(edges):
            raise malformed
        self._edges = edges
        self._start = start_index
        try:
            self._dawg_count = sum(1 for _ in self._dawg_words())
        except IndexError:
            self._edges, self._start, self._dawg_count = [], None, 0
            raise malformed from None

    # DAWG traversal

    def _siblings(self, index: int) -> Iterator[_Edge]:
        while True:
            edge = self._edges[index]
            yield edge
            if edge.last_edge:
                return
            index += 1

    def _find_edge_for_char(self, index: int, ch: str) -> _Edge | None:
        target = _char_to_ord(ch)
        return next((e for e in self._siblings(index) if e.letter == target), None)

    def _trace_to_last_edge(self, word: str) -> _Edge | None:
        if self._start is None or not word:
            return None
        edge = self._find_edge_for_char(self._start, word[0])
        for ch in word[1:]:
            if edge is None or not edge.children:
                return None
            edge = self._find_edge_for_char(edge.children, ch)
        return edge

    def _dawg_words(self) -> Iterator[str]:
        if self._start is None:
            return

        def walk(index: int, prefix: str) -> Iterator[str]:
            for edge in self._siblings(index):
                word = prefix + _ord_to_char(edge.letter)
                if edge.accept:
                    yield word
                if edge.children:
                    yield from walk(edge.children, word)

        yield from walk(self._start, "")

    # Queries and updates

    def contains(self, word: str) -> bool:
        """Return True if the word is in the lexicon, ignoring case."""
        word = word.lower()
        edge = self._trace_to_last_edge(word)
        if edge is not None and edge.accept:
            return True
        position = bisect.bisect_left(self._other_words, word)
        return (
            position < len(self._other_words)
            and self._other_words[position] == word
        )

    def contains_prefix(self, prefix: str) -> bool:
        """Return True if any word begins with prefix, ignoring case."""
        if not prefix:
            return True
        prefix = prefix.lower()
        if self._trace_to_last_edge(prefix) is not None:
            return True
        for word in self._other_words:
            if word.startswith(prefix):
                return True
            if prefix < word:
                return False
        return False

    def add(self, word: str) -> None:
        """Add a word, stored in lower case."""
        word = word.lower()
        if not self.contains(word):
            bisect.insort(self._other_words, word)

    def clear(self) -> None:
        """Remove every word."""
        self._edges = []
        self._start = None
        self._dawg_count = 0
        self._other_words = []

    def is_empty(self) -> bool:
        """Return True if the lexicon holds no words."""
        return len(self) == 0

    def map_all(self, fn: Callable[[str], object]) -> None:
        """Call fn on every word in alphabetical order."""
        for word in self:
            fn(word)

    def copy(self) -> Lexicon:
        """Return an independent lexicon with the same words."""
        clone = Lexicon()
        clone._edges = list(self._edges)
        clone._start = self._start
        clone._dawg_count = self._dawg_count
        clone._other_words = list(self._other_words)
        return clone

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._dawg_count + len(self._other_words)

    def __iter__(self) -> Iterator[str]:
        return heapq.merge(self._dawg_words(), list(self._other_words))

    def __repr__(self) -> str:
        return f"Lexicon({len(self)} words)"