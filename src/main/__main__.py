"""
Main module entry point.

This allows running the server as: python -m src.main --profile dev
"""

from .server import main

if __name__ == "__main__":
    main()
