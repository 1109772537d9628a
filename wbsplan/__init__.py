"""Work Breakdown Structure projects: task trees, effort totals, XML files and a command line."""

__version__ = "1.0.0"
__all__ = ["model", "xmlio", "config", "cli"]