"""wirectl — wiring diagrams between module ports, from the command line."""

__version__ = "0.1.0"
