"""Advent of Code puzzle solvers, grid and heap helpers, and an input fetcher."""

__version__ = "0.1.0"