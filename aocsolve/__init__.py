"""Solvers for daily programming puzzles from the 2020, 2021 and 2024 seasons."""

__version__ = "0.1.0"