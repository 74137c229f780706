"""Inverted word index over documents, held in a hash table or a binary search tree, with ranked search."""

__version__ = "0.1.0"