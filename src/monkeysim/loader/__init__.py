"""
Loader: turns monkey notes text into a validated Simulation.

The core never imports this package; it only consumes Simulation values.
"""

from monkeysim.loader.errors import ParseError
from monkeysim.loader.parser import parse_notes, load_notes

__all__ = [
    "ParseError",
    "parse_notes",
    "load_notes",
]
