"""Classic data structures and algorithms: sorting, linked lists, stacks,
queues, binary trees, heaps, hash tables, shortest paths and LSH."""

__version__ = "0.1.0"