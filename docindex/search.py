"""Rank documents by how often they contain the words of a query."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import IO, Any, Optional, Union

from .binary_tree import BinaryTree
from .documento import Document
from .hash_table import HashTable

Index = Union[HashTable, BinaryTree]

DEFAULT_LIMIT = 10


def binary_search(items: Sequence[Any], value: Any) -> int:
    """Index of ``value`` in the sorted sequence ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        current = items[middle]
        if current == value:
            return middle
        if current < value:
            low = middle + 1
        else:
            high = middle - 1
    return -1


def _take(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"unexpected end of input, expected {what}") from None


def _take_int(tokens: Iterator[str], what: str) -> int:
    tok = _take(tokens, what)
    try:
        return int(tok)
    except ValueError:
        raise ValueError(f"expected {what}, found {tok!r}") from None


def read_index(stream: IO[str]) -> list[tuple[str, list[Document]]]:
    """Parse a saved index.

    The input starts with the number of words; each word is followed by the
    number of documents and then ``name count`` for each of them.  Documents
    are returned in file order.
    """
    tokens = iter(stream.read().split())
    total = _take_int(tokens, "number of words")
    entries = []
    for _ in range(total):
        word = _take(tokens, "a word")
        count = _take_int(tokens, f"document count of {word!r}")
        docs = []
        for _ in range(count):
            name = _take(tokens, "a document name")
            docs.append(Document(name, _take_int(tokens, f"occurrences in {name!r}")))
        entries.append((word, docs))
    return entries


def load_hash_index(stream: IO[str]) -> HashTable:
    """Load a saved index into a hash table; a repeated word keeps its last list."""
    index = HashTable()
    for word, docs in read_index(stream):
        index.set(word, docs[::-1])
    return index


def load_tree_index(stream: IO[str]) -> BinaryTree:
    """Load a saved index into a tree; lookups of a repeated word find its first list."""
    index = BinaryTree()
    for word, docs in read_index(stream):
        index.add_recursive(word, docs[::-1])
    return index


def read_stop_words(stream: IO[str]) -> list[str]:
    """Parse a stop-word list: a count followed by that many words, kept in order."""
    tokens = iter(stream.read().split())
    total = _take_int(tokens, "number of stop words")
    return [_take(tokens, "a stop word") for _ in range(total)]


def search(index: Index, stop_words: Sequence[str], queries: Iterable[str]) -> list[Document]:
    """Sum the occurrences of the query words per document and rank them.

    Words found in the sorted ``stop_words`` are ignored.  The result holds new
    documents ordered by descending count, then by name.
    """
    totals: dict[str, Document] = {}
    for word in queries:
        if binary_search(stop_words, word) != -1:
            continue
        docs = index.get(word)
        if docs is None:
            continue
        for doc in docs:
            found = totals.get(doc.name)
            if found is None:
                totals[doc.name] = Document(doc.name, doc.count)
            else:
                found.increment(doc.count)
    return sorted(totals.values(), key=Document.rank_key)


def format_results(documents: Iterable[Document], limit: int = DEFAULT_LIMIT) -> str:
    """One ``name count`` line for each of the first ``limit`` documents."""
    lines = [f"{doc.name} {doc.count}\n" for _, doc in zip(range(limit), documents)]
    return "".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load an index and stop words, then rank documents for words from standard input."""
    parser = argparse.ArgumentParser(
        prog="docindex-search",
        description="Rank documents for the words read from standard input.",
    )
    parser.add_argument("index", nargs="?", help="saved index file; read from standard input if omitted")
    parser.add_argument("stop_words", nargs="?", help="stop-word file; read from standard input if omitted")
    parser.add_argument("--tree", action="store_true", help="use a binary search tree instead of a hash table")
    args = parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    index_path = args.index if args.index is not None else next(tokens, None)
    stop_path = args.stop_words if args.stop_words is not None else next(tokens, None)
    if index_path is None or stop_path is None:
        parser.error("an index file and a stop-word file are required")

    loader = load_tree_index if args.tree else load_hash_index
    try:
        with open(index_path, encoding="utf-8") as stream:
            index = loader(stream)
    except FileNotFoundError:
        print(f"Arquivo {index_path} nao foi encontrado!")
        return 1
    except ValueError as exc:
        print(f"{index_path}: {exc}", file=sys.stderr)
        return 1

    try:
        with open(stop_path, encoding="utf-8") as stream:
            stop_words = read_stop_words(stream)
    except FileNotFoundError:
        print(f"Arquivo {stop_path} nao foi encontrado!")
        return 1
    except ValueError as exc:
        print(f"{stop_path}: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_results(search(index, stop_words, tokens)))
    return 0


if __name__ == "__main__":
    sys.exit(main())