"""Allow running with ``python -m package_order``."""

from .cli import main

main()
