"""Rapporto di verifica delle cassette di primo soccorso (D.M. 388/2003)."""

from .cli import main

__all__ = ["main"]
