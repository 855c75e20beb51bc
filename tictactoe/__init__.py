"""Tic-Tac-Toe H2H: moteur de jeu, service applicatif et GUI pygame."""

__version__ = "0.1.0"
