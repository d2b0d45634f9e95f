"""Adapter for the public code.golf JSON API."""

import json
import logging

import requests
from requests.adapters import HTTPAdapter, Retry

from ..core.errors import FetchError
from ..core.models import Hole, Submission
from .base import BaseAdapter

logger = logging.getLogger(__name__)

API_ROOT = 'https://code.golf/api'
# The API is a little unstable; transient failures usually clear on retry
MAX_ATTEMPTS = 10
TIMEOUT = 30


class CodeGolfAdapter(BaseAdapter):
    """Fetch holes, languages and solution logs from code.golf.

    Every raw payload is kept so the run can be saved with
    ``save_snapshot`` and replayed offline through SnapshotAdapter.
    """

    def __init__(self, api_root: str = API_ROOT, session=None,
                 timeout: float = TIMEOUT):
        self.api_root = api_root.rstrip('/')
        self.session = session if session is not None else self._make_session()
        self.timeout = timeout
        self.snapshot = {'langs': [], 'holes': [], 'solutions': {}}

    @staticmethod
    def _make_session() -> requests.Session:
        session = requests.Session()
        # total counts retries, not attempts
        retry = Retry(total=MAX_ATTEMPTS - 1, backoff_factor=0.4,
                      status_forcelist=[429, 500, 502, 503, 504],
                      allowed_methods=['GET'])
        adapter = HTTPAdapter(max_retries=retry)
        session.mount('https://', adapter)
        session.mount('http://', adapter)
        return session

    def _get_json(self, path: str, params: dict | None = None):
        url = f'{self.api_root}/{path}'
        logger.debug(f"GET {url} {params or ''}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RetryError as e:
            raise FetchError(
                f"code.golf API kept failing for {url} after {MAX_ATTEMPTS} "
                f"attempts; it is occasionally unstable, try re-running") from e
        except requests.RequestException as e:
            raise FetchError(f"Could not fetch {url}: {e}") from e

    def _get_list(self, path: str, params: dict | None = None) -> list:
        data = self._get_json(path, params)
        if not isinstance(data, list):
            raise FetchError(f"Unexpected response format from {path}: {type(data).__name__}")
        return data

    def fetch_langs(self) -> list[str]:
        raw = self._get_list('langs')
        self.snapshot['langs'] = raw
        return self._parse_langs(raw)

    def fetch_holes(self) -> list[Hole]:
        raw = self._get_list('holes')
        self.snapshot['holes'] = raw
        return self._parse_holes(raw)

    def fetch_submissions(self, hole_id: str, lang: str | None) -> list[Submission]:
        params = {'hole': hole_id}
        if lang:
            params['lang'] = lang
        raw = self._get_list('solutions-log', params)
        self.snapshot['solutions'].setdefault(hole_id, []).extend(raw)
        return self._parse_submissions(raw, hole_id)

    def save_snapshot(self, output_path: str):
        """Write every payload fetched so far as a SnapshotAdapter file."""
        with open(output_path, 'w') as f:
            json.dump(self.snapshot, f)
