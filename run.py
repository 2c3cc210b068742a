"""
Entry Point Script (Bootstrap)
==============================
Starts the application straight from a source checkout.

It sits outside the 'src' package and puts 'src' on sys.path, so
'from studentrecords...' resolves without installing the project first.

Usage:
    $ python run.py
"""
import os
import sys

current_dir: str = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(current_dir, "src"))

from studentrecords.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
