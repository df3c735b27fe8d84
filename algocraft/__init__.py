"""Classic algorithms: sorting, searching, graphs, geometry, clustering, puzzles and strings."""

__version__ = "0.1.0"