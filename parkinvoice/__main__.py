"""
Convenience entry point for running parkinvoice directly.

Usage: python -m parkinvoice [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
