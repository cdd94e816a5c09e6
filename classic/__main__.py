"""
Classic Module Entry Point
===========================

Allows running the toolkit via: python -m classic
"""

from classic.cli import main

if __name__ == "__main__":
    main()
