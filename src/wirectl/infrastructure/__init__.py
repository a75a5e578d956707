"""Infrastructure layer — diagram file I/O, graph building, DOT rendering."""
