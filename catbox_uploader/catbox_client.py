#!/usr/bin/env python3
"""
Catbox / Litterbox API client.
"""

import requests
from requests_toolbelt import MultipartEncoderMonitor
from typing import Optional

from . import __version__
from .errors import UploadError
from .progress import ProgressTracker
from .upload_request import UploadRequest, build_multipart
from .logging_utils import get_logger

logger = get_logger(__name__)


class CatboxClient:
    """Client for uploading files to Catbox and Litterbox."""

    USER_AGENT = f"catbox-uploader/{__version__}"

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            session: Optional requests session to use instead of a new one
        """
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.USER_AGENT})

    def upload(self, request: UploadRequest, tracker: ProgressTracker) -> str:
        """
        Upload a file, reporting progress to the tracker.

        There are no retries: any failure ends the upload.

        Args:
            request: Prepared upload request
            tracker: Progress tracker fed with every chunk sent on the wire

        Returns:
            str: The response body, normally the URL of the uploaded file

        Raises:
            SizeLimitExceeded: If the file is over the target's ceiling
            UploadError: On connection failure, non-2xx status or I/O error
        """
        request.target.check_size(request.file_size)
        logger.info(
            f"Uploading {request.file_path} ({request.file_size} bytes) to {request.target.url}"
        )

        try:
            with open(request.file_path, "rb") as file_obj, tracker:
                encoder = build_multipart(request, file_obj)
                tracker.start(encoder.len)

                last_bytes = [0]

                def on_progress(monitor):
                    delta = monitor.bytes_read - last_bytes[0]
                    if delta > 0:
                        tracker.on_bytes(delta)
                        last_bytes[0] = monitor.bytes_read

                monitor = MultipartEncoderMonitor(encoder, on_progress)

                response = self.session.post(
                    request.target.url,
                    data=monitor,
                    headers={"Content-Type": monitor.content_type},
                )
                response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            body = e.response.text.strip() if e.response is not None else ""
            logger.debug(f"Upload rejected with HTTP {status}: {body}")
            raise UploadError(f"HTTP {status} {body}".rstrip()) from e
        except (requests.exceptions.RequestException, OSError) as e:
            logger.debug(f"Upload failed: {e}")
            raise UploadError(e) from e

        logger.debug(f"Upload response: {response.text!r}")
        return response.text
