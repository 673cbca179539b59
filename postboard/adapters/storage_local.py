from __future__ import annotations
import json, os
from typing import Any, Dict
from postboard.domain.ports import StoragePort


class StorageLocal(StoragePort):
    """Reads user settings from a JSON file under ``root_dir``."""

    SETTINGS_FILE = "user_settings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def settings_path(self) -> str:
        return os.path.join(self.root, self.SETTINGS_FILE)

    def load_user_settings(self) -> Dict[str, Any]:
        if not os.path.exists(self.settings_path):
            return {}
        with open(self.settings_path, "r", encoding="utf-8") as f:
            stored = json.load(f)
        if not isinstance(stored, dict):
            raise ValueError(f"{self.settings_path}: expected a JSON object")
        return stored
