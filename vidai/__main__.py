"""
Entry point for running VIDAI as a module.

Usage: python -m vidai [command] [options]
"""
from .cli import main

if __name__ == "__main__":
    main()
