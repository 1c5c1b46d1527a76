"""
Run with: python -m listcarousel
"""
import sys

from listcarousel.main import main

if __name__ == "__main__":
    sys.exit(main())
