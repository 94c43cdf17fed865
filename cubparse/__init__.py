"""Reader for .cub scene description files: data model, parser and command."""

__version__ = "0.1.0"
__all__ = ["config", "parser", "textutil"]