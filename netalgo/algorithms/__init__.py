"""Graph algorithms.

Functions here take a graph as their first argument and never mutate it,
except ``augmenting_path`` which updates the residual network it is given.
"""
