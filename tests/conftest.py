import os
import sys

# The interpreter modules sit at the repository root rather than in a package;
# make them importable however pytest was invoked.
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
