"""
Command line interface built with Typer.
"""

from .app import app

__all__ = ["app"]
