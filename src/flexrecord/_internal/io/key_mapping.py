"""Key mapping I/O helpers (internal)."""

from pathlib import Path
from typing import Union

from flexrecord.kernel.key_mapping import KeyMapping


def load_key_mapping_from_path(path: Union[str, Path]) -> KeyMapping:
    """Load a key mapping from a JSON file path."""
    mapping_path = Path(path)
    data = mapping_path.read_bytes()
    return KeyMapping.from_json_bytes(data)
