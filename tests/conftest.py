import sys
from pathlib import Path

# Allow running the suite from a checkout without installing the package
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
