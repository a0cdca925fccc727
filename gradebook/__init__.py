"""Student records, grading rules and a grade report command."""

__version__ = "0.1.0"