"""Adapter for offline JSON snapshots of the code.golf API.

Snapshot layout (as written by CodeGolfAdapter.save_snapshot):

    {
      "langs": [{"id": "rust", "name": "Rust"}, ...],
      "holes": [{"id": "fizz-buzz", "name": "Fizz Buzz", ...}, ...],
      "solutions": {"fizz-buzz": [{"golfer": ..., "bytes": ..., ...}], ...}
    }

"langs" may be omitted, in which case the languages seen in the
solution logs are the known set.
"""

import json

from ..core.errors import FetchError
from ..core.models import Hole, Submission
from .base import BaseAdapter


class SnapshotAdapter(BaseAdapter):
    """Serve holes and solution logs from a snapshot file."""

    def __init__(self, data_path: str):
        self.data_path = data_path
        self._data = None

    def _load(self) -> dict:
        if self._data is None:
            try:
                with open(self.data_path, 'r') as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise FetchError(f"Could not read snapshot {self.data_path}: {e}") from e
            if not isinstance(data, dict) or not isinstance(data.get('holes'), list):
                raise FetchError(f"Snapshot {self.data_path} has no hole list")
            if not isinstance(data.get('solutions', {}), dict):
                raise FetchError(f"Snapshot {self.data_path} solutions are not keyed by hole")
            if not isinstance(data.get('langs', []), list):
                raise FetchError(f"Snapshot {self.data_path} has a malformed language list")
            self._data = data
        return self._data

    def fetch_langs(self) -> list[str]:
        data = self._load()
        if 'langs' in data:
            return self._parse_langs(data['langs'])
        seen = set()
        for hole_id in data.get('solutions', {}):
            seen.update(raw['lang'] for raw in self._raw_log(hole_id)
                        if isinstance(raw, dict) and raw.get('lang'))
        return sorted(seen)

    def fetch_holes(self) -> list[Hole]:
        return self._parse_holes(self._load()['holes'])

    def fetch_submissions(self, hole_id: str, lang: str | None) -> list[Submission]:
        raw_log = self._raw_log(hole_id)
        if lang:
            # Non-dict entries are kept so they are counted as malformed
            raw_log = [raw for raw in raw_log
                       if not isinstance(raw, dict) or raw.get('lang') in (None, '', lang)]
        return self._parse_submissions(raw_log, hole_id)

    def _raw_log(self, hole_id: str) -> list:
        raw_log = self._load().get('solutions', {}).get(hole_id, [])
        if not isinstance(raw_log, list):
            raise FetchError(f"Snapshot {self.data_path} solution log for {hole_id} is not a list")
        return raw_log
