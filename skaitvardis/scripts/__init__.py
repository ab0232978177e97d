"""CLI scripts for skaitvardis."""

from skaitvardis.scripts.convert import main as convert_main

__all__ = [
    "convert_main",
]
