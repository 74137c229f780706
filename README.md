# docindex

`docindex` builds an inverted index that maps each word to the documents it
appears in, with a count per document, and ranks documents against a set of
query words while ignoring stop words.

The index can be held in either of two structures that ship with the package:

- `docindex.hash_table.HashTable`: a separate-chaining hash table with a fixed
  number of buckets (919 by default) and a pluggable hash function. The
  default, `string_hash(key, table_size)`, is a rolling hash over the key's
  UTF-8 bytes and needs a table of at least two buckets. The table supports
  `set` (returns the previous value or `None`), `get`, `pop`, `len()`, `in`,
  iteration over keys and `items()`.
- `docindex.binary_tree.BinaryTree`: an unbalanced binary search tree. `add`
  replaces the value of an existing key; `add_recursive` always inserts,
  sending equal keys to the right. It also has `get`, `remove`, `is_empty`,
  `min`, `max`, `pop_min`, `pop_max`, `format`, and the traversals `inorder`,
  `preorder`, `postorder`, `levelorder`, `inorder_recursive`,
  `preorder_recursive` and `postorder_recursive`, each returning a list of
  `KeyValue(key, value)` pairs.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Building an index

`docindex-build` reads a documents file. It starts with the number of
documents; each document is then given as its name, a colon, the number of
words that follow, and the words themselves, all separated by whitespace:

```
2
intro.txt: 3 data index data
notes.txt: 2 index search
```

It prints the number of distinct words, then one line per word: the word, the
number of documents holding it, and for each such document its name and how
many times the word occurs in it.

```
docindex-build docs.txt
docindex-build --tree docs.txt
```

If no path is given, the first whitespace-separated token on standard input is
taken as the path. By default the index is a `HashTable` and words come out in
bucket order; with `--tree` it is a `BinaryTree` and words come out in sorted
order. A missing file prints `Arquivo <path> nao foi encontrado!` and the
command exits with status 1; a malformed file is reported on standard error,
also with status 1.

From Python, the same steps are `read_documents`, `build_hash_index`,
`build_tree_index`, `index_entries` and `format_index` in `docindex.indexer`.

## Searching

`docindex-search` reads a saved index file, a stop-word file, and then query
words from standard input.

The index file starts with the number of words; each word is followed by the
number of documents it appears in and a `name count` pair per document. Only
whitespace separates the tokens, so the output of `docindex-build` can be used
directly:

```
2
data 1
intro.txt 2
index 2
intro.txt 1
notes.txt 1
```

The stop-word file starts with a count followed by that many words. The words
must be in sorted order, since they are looked up by binary search.

```
docindex-search index.txt stop.txt < query.txt
docindex-search --tree index.txt stop.txt < query.txt
```

If either path is left out, it is taken from the start of standard input and
the remaining tokens are the query words. Every query word that is not a stop
word and is in the index adds its per-document counts to a running total.
Documents are ranked by total count, highest first, with ties broken by name,
and the top ten are printed as `name count` lines. Missing or malformed files
are reported as for `docindex-build`.

When a word appears twice in the index file, the hash table keeps the last
list given for it, while with `--tree` lookups find the first.

From Python, use `binary_search`, `read_index`, `load_hash_index` or
`load_tree_index`, `read_stop_words`, `search` and `format_results` in
`docindex.search`.

## Documents

`docindex.documento.Document` is a dataclass holding a document `name` and an
occurrence `count` that starts at 1. `increment(amount=1)` raises the count,
and `rank_key()` gives the ordering used for search results: higher count
first, then name.

## What it does not do

Words are matched exactly as written: there is no case folding, punctuation
stripping or stemming. The index lives only in memory; the only way to keep it
is the plain-text listing that `docindex-build` prints.

## Running the tests

```
pytest
```