"""Solvers for the 2023 Advent of Code puzzles."""