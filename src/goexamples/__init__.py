"""List Go documentation examples per function, method and package."""

__version__ = "0.1.0"
