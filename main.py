"""Launch the polynomial drawer: ``python main.py parabola`` or ``python main.py cubic``."""

import sys

from poly_drawer.main import main

if __name__ == "__main__":
    sys.exit(main())
