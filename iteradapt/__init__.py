"""Extra iterator adaptors: grouping, chunking, combinations, merging and more."""

__version__ = "0.1.0"