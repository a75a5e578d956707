"""Domain layer — the diagram model and reference parsing.

Pure Python, no I/O. Infrastructure and services import from here;
this package never imports from them.
"""
