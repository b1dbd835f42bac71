"""Classic algorithm exercises on arrays, lists, trees, strings and more."""

__version__ = "0.1.0"

__all__ = ["arrays", "bst", "cli", "greedy", "linked_list", "matrix", "recursion", "strings"]