from pathlib import Path

from tracker.utilities.config import DATA_DIR

# Centralized file names for the persisted collections (single source of truth)
CHECKLIST_FILENAME = 'checklist.json'
DELIVERY_FILENAME = 'delivery.json'
DINE_IN_FILENAME = 'dine_in.json'
SAVED_NAMES_FILENAME = 'saved_names.json'


def collection_paths(data_dir: Path = DATA_DIR) -> dict[str, Path]:
    data_dir = Path(data_dir)
    return {
        'checklist': data_dir / CHECKLIST_FILENAME,
        'delivery': data_dir / DELIVERY_FILENAME,
        'dine_in': data_dir / DINE_IN_FILENAME,
        'saved_names': data_dir / SAVED_NAMES_FILENAME,
    }


__all__ = ['DATA_DIR', 'CHECKLIST_FILENAME', 'DELIVERY_FILENAME', 'DINE_IN_FILENAME',
           'SAVED_NAMES_FILENAME', 'collection_paths']
