"""Solutions to classic introductory competitive-programming problems."""

__version__ = "0.1.0"
__all__ = ["cli", "grids", "numbers", "queries", "sequences", "text"]