"""
Run with: python -m studentrecords
"""
import sys

from studentrecords.main import main

if __name__ == "__main__":
    sys.exit(main())
