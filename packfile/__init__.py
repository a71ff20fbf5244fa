"""Pack the files a pattern selects into one indexed archive, list it and unpack it."""

__version__ = "0.1.0"
__all__ = ["__version__"]