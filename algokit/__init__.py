"""Classic dynamic-programming, string, graph, tree and recursion algorithms."""

__version__ = "0.1.0"

__all__ = [
    "alignment",
    "arrays",
    "counting",
    "games",
    "graph",
    "intervals",
    "justify",
    "knapsack",
    "matching",
    "numtext",
    "palindromes",
    "recursion",
    "stocks",
    "strings",
    "subsequences",
    "trees",
]