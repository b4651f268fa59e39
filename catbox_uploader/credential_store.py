#!/usr/bin/env python3
"""
Persistence for the default Catbox userhash.

The userhash lives in a single plaintext file. There is no locking: two
invocations racing on the file is an accepted edge case.
"""

import os
from typing import Optional

from .errors import CredentialFileError
from .logging_utils import get_logger

logger = get_logger(__name__)


class CredentialStore:
    """Loads and saves the default userhash."""

    def __init__(self, path: str):
        """
        Initialize the store.

        Args:
            path: Path to the userhash file
        """
        self.path = path

    def load(self) -> Optional[str]:
        """
        Read the stored userhash.

        Creates the file empty when it does not exist yet.

        Returns:
            The stored userhash, or None if nothing is stored

        Raises:
            CredentialFileError: If the file cannot be read or created
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                token = f.read().strip()
        except FileNotFoundError:
            logger.debug(f"No userhash file at {self.path}, creating an empty one")
            self._write("")
            return None
        except OSError as e:
            logger.debug(f"Failed to read userhash file {self.path}: {e}")
            raise CredentialFileError(self.path, e) from e

        return token or None

    def save(self, token: str) -> None:
        """
        Overwrite the stored userhash.

        Args:
            token: The userhash to store

        Raises:
            CredentialFileError: If the file cannot be written
        """
        self._write(token)
        logger.debug(f"Saved userhash to {self.path}")

    def _write(self, content: str) -> None:
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise CredentialFileError(self.path, e) from e
