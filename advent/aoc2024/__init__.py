"""Solvers for the 2024 Advent of Code puzzles."""