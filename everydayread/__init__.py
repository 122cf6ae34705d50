"""Daily reading helper: shuffled guideline sentences, trending topics, random source files and a binary-search exercise."""

__version__ = "0.1.0"
__all__ = ["__version__"]