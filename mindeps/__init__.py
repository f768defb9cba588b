"""mindeps: minimal dependency edges of a multi-package workspace."""

__version__ = "0.1.0"
