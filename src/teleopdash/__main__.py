"""
Run with: python -m teleopdash
"""
import sys

from teleopdash.app.main import main

if __name__ == "__main__":
    sys.exit(main())
