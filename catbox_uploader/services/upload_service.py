#!/usr/bin/env python3
"""
Upload Service Module

Handles the file upload workflow for the Catbox uploader.
"""

import time
import logging
from dataclasses import replace
from typing import Optional

from ..catbox_client import CatboxClient
from ..progress import ProgressTracker
from ..upload_request import UploadTarget, prepare_request
from ..utils import format_size, format_speed, format_time, print_info, BLUE, END
from .credential_service import CredentialService, resolve_credential

logger = logging.getLogger("catbox_uploader")


class UploadService:
    """Service for handling file upload operations."""

    def __init__(self, client: CatboxClient, credential_service: CredentialService):
        """
        Initialize the upload service.

        Args:
            client: Catbox API client instance
            credential_service: Service resolving and storing the userhash
        """
        self.client = client
        self.credential_service = credential_service

    def upload_file(
        self,
        file_path: str,
        target: UploadTarget,
        anon: bool = False,
        userhash: Optional[str] = None,
        stored_userhash: Optional[str] = None,
    ) -> str:
        """
        Validate, resolve the userhash, upload and print the result.

        The file is checked against the target's size ceiling before any
        prompt is shown or any request is sent.

        Args:
            file_path: Path to the file to upload
            target: Catbox or Litterbox target
            anon: Force an anonymous upload
            userhash: Userhash given on the command line
            stored_userhash: Default userhash from the credential store

        Returns:
            str: The URL returned by the service
        """
        request = prepare_request(file_path, target)

        if target.accepts_userhash:
            decision = resolve_credential(anon, userhash, stored_userhash)
            request = replace(request, userhash=self.credential_service.apply(decision))

        label = target.label
        if target.is_temporary:
            label = f"{target.label} for {target.ttl}"

        tracker = ProgressTracker(request.file_name, label)
        start_time = time.time()
        url = self.client.upload(request, tracker)
        elapsed_time = time.time() - start_time

        tracker.finish(
            f'Uploaded "{request.file_name}" successfully! URL: {BLUE}{url}{END}'
        )
        speed = request.file_size / elapsed_time if elapsed_time > 0 else 0
        print_info(
            f"{format_size(request.file_size)} in {format_time(elapsed_time)} "
            f"at {format_speed(speed)}"
        )
        logger.info(f"Uploaded {request.file_path} to {url}")
        return url
