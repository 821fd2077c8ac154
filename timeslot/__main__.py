"""
Entry point for ``python -m timeslot``.
"""

from .cli.app import app

if __name__ == "__main__":
    app()
