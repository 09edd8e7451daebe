"""Turn-based ant colony simulation on a random grid world, with a text view and a JSON HTTP endpoint."""

__version__ = "0.1.0"
__all__ = ["__version__"]