"""Versão da biblioteca (usada no header User-Agent)."""

__version__ = "0.1.0"
