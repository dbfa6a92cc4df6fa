"""Solutions to short competitive programming problems, as functions and a command."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "cli", "sequences", "textproblems"]