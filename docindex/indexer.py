"""Build an inverted index from documents and the words they contain."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from typing import IO, Optional, Union

from .binary_tree import BinaryTree
from .documento import Document
from .hash_table import HashTable

Index = Union[HashTable, BinaryTree]
Entry = tuple[str, list[Document]]

_WORD_PATTERN = re.compile(r"\s*(\S+)")


class _Scanner:
    """Reads tokens and delimited fields from a block of text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def token(self) -> str:
        match = _WORD_PATTERN.match(self._text, self._pos)
        if match is None:
            raise ValueError("unexpected end of input")
        self._pos = match.end()
        return match.group(1)

    def integer(self, what: str) -> int:
        word = self.token()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected {what}, found {word!r}") from None

    def until(self, separator: str) -> str:
        end = self._text.find(separator, self._pos)
        if end < 0:
            raise ValueError(f"expected {separator!r} before end of input")
        chunk = self._text[self._pos:end]
        self._pos = end + len(separator)
        return chunk


def read_documents(stream: IO[str]) -> list[tuple[str, list[str]]]:
    """Parse a document listing.

    The input starts with the number of documents; each document is given as
    ``name: count`` followed by ``count`` whitespace-separated words.
    """
    scanner = _Scanner(stream.read())
    total = scanner.integer("number of documents")
    documents = []
    for _ in range(total):
        name = scanner.until(":").strip()
        count = scanner.integer(f"word count of {name!r}")
        words = [scanner.token() for _ in range(count)]
        documents.append((name, words))
    return documents


def _add_occurrence(docs: list[Document], name: str) -> None:
    for doc in docs:
        if doc.name == name:
            doc.increment()
            return
    docs.insert(0, Document(name))


def build_hash_index(documents: Iterable[tuple[str, Iterable[str]]]) -> HashTable:
    """Map each word to the documents holding it, in a hash table."""
    index = HashTable()
    for name, words in documents:
        for word in words:
            docs = index.get(word)
            if docs is None:
                index.set(word, [Document(name)])
            else:
                _add_occurrence(docs, name)
    return index


def build_tree_index(documents: Iterable[tuple[str, Iterable[str]]]) -> BinaryTree:
    """Map each word to the documents holding it, in a binary search tree."""
    index = BinaryTree()
    for name, words in documents:
        for word in words:
            docs = index.get(word)
            if docs is None:
                index.add(word, [Document(name)])
            else:
                _add_occurrence(docs, name)
    return index


def index_entries(index: Index) -> list[Entry]:
    """Word and document list pairs in the index's own iteration order."""
    if isinstance(index, BinaryTree):
        return [(pair.key, pair.value) for pair in index.inorder_recursive()]
    return index.items()


def format_index(entries: Iterable[Entry]) -> str:
    """Render entries: the word count, then one line per word with its documents."""
    entries = list(entries)
    lines = [str(len(entries))]
    for word, docs in entries:
        parts = [word, str(len(docs))]
        for doc in docs:
            parts.extend((doc.name, str(doc.count)))
        lines.append(" ".join(parts))
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Index a document file and print every word with its documents."""
    parser = argparse.ArgumentParser(
        prog="docindex-build",
        description="Print the inverted index of a document file.",
    )
    parser.add_argument("path", nargs="?", help="document file; read from standard input if omitted")
    parser.add_argument("--tree", action="store_true", help="use a binary search tree instead of a hash table")
    args = parser.parse_args(argv)

    path = args.path
    if path is None:
        path = next(iter(sys.stdin.read().split()), None)
        if path is None:
            parser.error("no document file given")

    try:
        with open(path, encoding="utf-8") as stream:
            documents = read_documents(stream)
    except FileNotFoundError:
        print(f"Arquivo {path} nao foi encontrado!")
        return 1
    except ValueError as exc:
        print(f"{path}: {exc}", file=sys.stderr)
        return 1

    index: Index = build_tree_index(documents) if args.tree else build_hash_index(documents)
    sys.stdout.write(format_index(index_entries(index)))
    return 0


if __name__ == "__main__":
    sys.exit(main())