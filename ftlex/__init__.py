"""Split lex specification files into sections and extract their quoted strings."""

__version__ = "0.1.0"
__all__ = ["cli", "parts", "quoted", "utils"]