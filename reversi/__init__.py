"""Reversi game engine with console play."""
