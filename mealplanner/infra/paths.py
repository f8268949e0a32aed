from pathlib import Path
from typing import Optional

from mealplanner.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)

def data_file(key: str, data_dir: Optional[Path] = None) -> Path:
    """Return the JSON file holding the collection stored under ``key``."""
    return Path(data_dir or DATA_DIR) / f'{key}.json'

__all__ = ['DATA_DIR', 'data_file']
