"""List open GitHub pull requests awaiting a user's review."""

__version__ = "0.1.0"
