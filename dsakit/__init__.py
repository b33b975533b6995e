"""Classic data structures and algorithms: arrays, sorting, recursion, trees, graphs, a trie and small containers."""

__version__ = "0.1.0"