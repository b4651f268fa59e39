#!/usr/bin/env python3
"""
Command Handlers Module

Contains handler functions for each CLI command.
Separates command routing from business logic.
"""

import logging
from typing import Optional

from .catbox_client import CatboxClient
from .credential_store import CredentialStore
from .errors import UsageError
from .services import CredentialService, UploadService
from .upload_request import UploadTarget

logger = logging.getLogger("catbox_uploader")


def handle_upload_command(
    client: CatboxClient,
    store: CredentialStore,
    file_path: str,
    anon: bool = False,
    userhash: Optional[str] = None,
    time_option: Optional[str] = None,
) -> str:
    """
    Handle the file upload command.

    Args:
        client: Catbox API client instance
        store: Credential store holding the default userhash
        file_path: Path of the file to upload
        anon: If True, upload to Catbox without a userhash
        userhash: Userhash given on the command line
        time_option: Litterbox retention time; uploads to Catbox if None

    Returns:
        The URL of the uploaded file
    """
    if userhash is not None and not userhash.strip():
        raise UsageError("ERROR: The userhash must not be empty.")

    if time_option is not None:
        target = UploadTarget.temporary(time_option)
    else:
        target = UploadTarget.permanent()

    stored_userhash = store.load() if target.accepts_userhash else None
    logger.debug(
        f"Target: {target.label}, stored userhash: {'yes' if stored_userhash else 'no'}"
    )

    upload_service = UploadService(client, CredentialService(store))
    return upload_service.upload_file(
        file_path,
        target,
        anon=anon,
        userhash=userhash,
        stored_userhash=stored_userhash,
    )


def handle_save_userhash_command(store: CredentialStore, userhash: str) -> None:
    """
    Handle --userhash given without a file: store it as the default.

    Args:
        store: Credential store holding the default userhash
        userhash: The userhash to store
    """
    if not userhash.strip():
        raise UsageError("ERROR: The userhash must not be empty.")
    CredentialService(store).save_default(userhash.strip())
