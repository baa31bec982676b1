import sys
from pathlib import Path

# Ensure the package root (app/) is importable during collection regardless
# of the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)
