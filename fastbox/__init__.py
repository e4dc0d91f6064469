"""An interactive command shell with a line editor and an SSH launcher."""

__version__ = "1.0.0"
__all__ = ["__version__"]