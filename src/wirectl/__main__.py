"""Allow ``python -m wirectl``."""

from wirectl.cli import main

main()
