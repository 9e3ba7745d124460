"""
Rewards Writer
==============

Persists the reward catalog as formatted JSON with atomic writes.
"""

import os
import json
import tempfile
from pathlib import Path
from typing import Sequence

from .errors import PersistenceError
from .models import RewardItem


class RewardsWriter:
    """Writes the rewards JSON file"""

    def __init__(self, path: str):
        self.path = Path(path)

    def _atomic_write(self, data):
        """
        Write JSON data atomically using temp file + rename

        Args:
            data: Data to write (will be JSON serialized)
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)

        temp_fd, temp_path = tempfile.mkstemp(
            dir=self.path.parent,
            prefix='.tmp_',
            suffix='.json'
        )

        try:
            with os.fdopen(temp_fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)

            os.replace(temp_path, self.path)

        except BaseException:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def write(self, items: Sequence[RewardItem]):
        """Replace the rewards file with items."""
        try:
            self._atomic_write([item.to_dict() for item in items])
        except OSError as e:
            raise PersistenceError(f"Could not write {self.path}: {e}") from e
