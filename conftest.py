"""Make ``follow_manager`` importable when running pytest from a checkout."""

import os
import sys

# The package is not required to be installed for the tests; putting the
# repository root on ``sys.path`` matches what ``python -m pytest`` does.
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
