"""A small interactive shell: word splitting, expansion, builtins and command execution."""

__version__ = "1.1.0"