"""
Main entry point for the uniqfile package.

Allows running the tool as: python -m uniqfile
"""

from uniqfile.cli import main

if __name__ == "__main__":
    main()
