import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional, Protocol

from exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueBackend(Protocol):
    """String key-value medium the favorites store writes through"""

    def get_string(self, key: str) -> Optional[str]: ...

    def set_string(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class LocalStorage:
    """Local JSON file holding string values by key, like a device preference store"""

    def __init__(self, data_directory: str = "storage/data", filename: str = "preferences.json"):
        self.data_directory = Path(data_directory)
        self.data_directory.mkdir(parents=True, exist_ok=True)

        self.preferences_file = self.data_directory / filename
        self._lock = threading.RLock()

    def _load_json_file(self, file_path: Path) -> Dict[str, str]:
        """Load the key-value map; a missing file is an empty map"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(str(file_path), f"corrupt JSON: {e}")
        except OSError as e:
            raise StorageError(str(file_path), str(e))

        if not isinstance(data, dict):
            raise StorageError(str(file_path), f"expected a JSON object, found {type(data).__name__}")
        return data

    def _save_json_file(self, file_path: Path, data: Dict[str, str]) -> None:
        """Write the whole map through a temp file so readers never see a partial file"""
        try:
            fd, tmp_path = tempfile.mkstemp(dir=file_path.parent, prefix=".preferences-", suffix=".tmp")
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(data, f, indent=2)
                os.replace(tmp_path, file_path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except (OSError, UnicodeError) as e:
            raise StorageError(str(file_path), str(e))

    def get_string(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._load_json_file(self.preferences_file).get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(key, f"expected a string value, found {type(value).__name__}")
        return value

    def set_string(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load_json_file(self.preferences_file)
            data[key] = value
            self._save_json_file(self.preferences_file, data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._load_json_file(self.preferences_file)
            if key not in data:
                return
            del data[key]
            self._save_json_file(self.preferences_file, data)

    def contains_key(self, key: str) -> bool:
        with self._lock:
            return key in self._load_json_file(self.preferences_file)
