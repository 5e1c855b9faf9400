"""soup-register core package.

Generates a markdown register of Software of Unknown Provenance (SOUP) for
every ``package.json`` in a project tree. Callable from both the GitHub Action
wrapper and the ``soup-register`` CLI.
"""

__all__ = [
    "core",
]
