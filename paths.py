# paths.py

from pathlib import Path

# Rotkatalogen för projektet (denna fil ligger i rotkatalogen)
ROOT = Path(__file__).parent

# Underkataloger inom projektet
DATA_DIR = ROOT / "Data"

SEED_FILE = DATA_DIR / "customerExamples.json"


def resolve(path: str) -> Path:
    """Resolve a configured path; relative paths are taken from the project root."""
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = ROOT / candidate
    return candidate
