"""Run the inflector command line interface with ``python -m inflector``."""

from .inflector import main

main()
