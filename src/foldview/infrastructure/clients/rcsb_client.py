"""
Client for downloading structures from the RCSB Protein Data Bank.
"""

import logging
from typing import List

import requests

from ...core.exceptions import StructureFetchError

logger = logging.getLogger(__name__)

DOWNLOAD_URL = "https://files.rcsb.org/download/{pdb_id}.pdb"
ENTRY_IDS_URL = "https://data.rcsb.org/rest/v1/holdings/current/entry_ids"


class RCSBClient:
    """Fetches PDB text and the list of current entries over HTTP."""

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout

    def _get(self, url: str) -> requests.Response:
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise StructureFetchError(f"Request to {url} failed: {e}") from e
        if response.status_code != 200:
            raise StructureFetchError(
                f"Request to {url} returned HTTP {response.status_code}"
            )
        return response

    def download(self, pdb_id: str) -> str:
        """
        Download the PDB file of an entry.

        Args:
            pdb_id: Four-character PDB identifier (case-insensitive)

        Returns:
            The file content as text

        Raises:
            StructureFetchError: If the download fails
        """
        url = DOWNLOAD_URL.format(pdb_id=pdb_id.strip().lower())
        logger.info("Downloading %s", url)
        return self._get(url).text

    def list_entry_ids(self) -> List[str]:
        """Return the sorted IDs of all entries currently held by the PDB."""
        try:
            ids = self._get(ENTRY_IDS_URL).json()
        except ValueError as e:
            raise StructureFetchError(f"Malformed entry list: {e}") from e
        return sorted(str(entry) for entry in ids)
