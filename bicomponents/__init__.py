"""Biconnected components, bridges and greedy maximal cliques of undirected graphs."""

__version__ = "0.1.0"