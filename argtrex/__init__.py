"""String and regular-expression command-line options with a compact regex engine."""

__version__ = "0.1.0"
__all__ = ["errors", "utils", "trex", "options"]