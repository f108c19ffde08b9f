"""Error reporting (errors), strict integer argument parsing (getnum) and a small demo command (app)."""

__version__ = "0.1.0"
__all__ = ["errors", "getnum", "app"]