# adaptive_autocompleter/cli/__init__.py
# terminal front-end for the search session

from .cli import CLI, main

__all__ = ["CLI", "main"]
