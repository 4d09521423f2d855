"""A small shell: syntax checks, a quote-aware lexer, builtins and a printf-style formatter."""

__version__ = "0.1.0"
__all__ = ["__version__"]