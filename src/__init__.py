"""Contact resolution for communication history events."""

__version__ = "0.1.0"
