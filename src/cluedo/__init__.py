"""Cluedo board game simulator with automated and LLM agent players."""

__version__ = "0.1.0"
