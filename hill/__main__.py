"""
Hill Module Entry Point
========================

Allows running the Hill CLI via: python -m hill
"""

from hill.cli import main

if __name__ == "__main__":
    main()
