#!/usr/bin/env python3
"""
Run the quiz CLI from a source checkout without installing the package.

    python main.py take --language python
    python main.py grade --language java --question 5 Solution.java
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == "__main__":
    from codequiz.cli import main
    sys.exit(main())
