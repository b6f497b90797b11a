"""Allow running needless as `python -m needless`."""

from .cli import main

main()
