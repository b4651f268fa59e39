#!/usr/bin/env python3
"""
Upload targets, request preparation and multipart body assembly.
"""

import os
import stat
import mimetypes
from dataclasses import dataclass
from typing import BinaryIO, Optional

from requests_toolbelt import MultipartEncoder

from .errors import FileNotFound, FileStatError, InvalidTimeOption, SizeLimitExceeded
from .logging_utils import get_logger

logger = get_logger(__name__)

CATBOX_URL = "https://catbox.moe/user/api.php"
LITTERBOX_URL = "https://litterbox.catbox.moe/resources/internals/api.php"

CATBOX_MAX_SIZE = 209715200  # 200MB
LITTERBOX_MAX_SIZE = 1073741824  # 1GB

VALID_TIMES = ("1h", "12h", "24h", "72h")


@dataclass(frozen=True)
class UploadTarget:
    """A destination service: permanent Catbox or temporary Litterbox."""

    label: str
    url: str
    max_size: int
    accepts_userhash: bool
    size_limit_message: str
    ttl: Optional[str] = None

    @classmethod
    def permanent(cls) -> "UploadTarget":
        return cls(
            label="Catbox",
            url=CATBOX_URL,
            max_size=CATBOX_MAX_SIZE,
            accepts_userhash=True,
            size_limit_message=(
                "ERROR: File size exceeds the 200MB limit for Catbox. Try using "
                "Litterbox instead (although temporary), check --help for details."
            ),
        )

    @classmethod
    def temporary(cls, ttl: str) -> "UploadTarget":
        """
        Build a Litterbox target.

        Args:
            ttl: How long the file is kept, one of VALID_TIMES

        Raises:
            InvalidTimeOption: If ttl is not a supported duration
        """
        if ttl not in VALID_TIMES:
            raise InvalidTimeOption(ttl)
        return cls(
            label="Litterbox",
            url=LITTERBOX_URL,
            max_size=LITTERBOX_MAX_SIZE,
            accepts_userhash=False,
            size_limit_message=(
                "ERROR: File size exceeds the 1GB limit for Litterbox. "
                "You will need to use another service."
            ),
            ttl=ttl,
        )

    @property
    def is_temporary(self) -> bool:
        return self.ttl is not None

    def check_size(self, file_size: int) -> None:
        if file_size > self.max_size:
            raise SizeLimitExceeded(self, file_size)


@dataclass(frozen=True)
class UploadRequest:
    """A validated upload of one local file to one target."""

    target: UploadTarget
    file_path: str
    file_size: int
    userhash: Optional[str] = None

    @property
    def file_name(self) -> str:
        return os.path.basename(self.file_path)

    @property
    def mime_type(self) -> str:
        return mimetypes.guess_type(self.file_name)[0] or "application/octet-stream"


def prepare_request(
    file_path: str, target: UploadTarget, userhash: Optional[str] = None
) -> UploadRequest:
    """
    Stat the file and validate it against the target's size ceiling.

    No network I/O happens here.

    Args:
        file_path: Path to the file to upload
        target: Destination service
        userhash: Optional userhash, dropped for targets that do not accept one

    Returns:
        UploadRequest ready for CatboxClient.upload

    Raises:
        FileNotFound: If the file does not exist
        FileStatError: If the path cannot be inspected or is a directory
        SizeLimitExceeded: If the file is over the target's ceiling
    """
    file_path = os.path.normpath(file_path)
    try:
        stats = os.stat(file_path)
    except FileNotFoundError as e:
        logger.debug(f"File not found: {file_path}")
        raise FileNotFound(file_path) from e
    except OSError as e:
        raise FileStatError(file_path, e) from e

    if stat.S_ISDIR(stats.st_mode):
        raise FileStatError(file_path, f"{file_path} is a directory")

    target.check_size(stats.st_size)

    return UploadRequest(
        target=target,
        file_path=file_path,
        file_size=stats.st_size,
        userhash=userhash if target.accepts_userhash and userhash else None,
    )


def build_multipart(request: UploadRequest, file_obj: BinaryIO) -> MultipartEncoder:
    """
    Assemble the multipart form for an upload.

    Field order is reqtype, time (Litterbox only), fileToUpload, then
    userhash (Catbox only, when present). The encoder streams file_obj and
    knows its total encoded length up front via ``.len``.

    Args:
        request: The upload request
        file_obj: Open binary file positioned at the start

    Returns:
        MultipartEncoder for the request body
    """
    fields = [("reqtype", "fileupload")]
    if request.target.is_temporary:
        fields.append(("time", request.target.ttl))
    fields.append(
        ("fileToUpload", (request.file_name, file_obj, request.mime_type))
    )
    if request.target.accepts_userhash and request.userhash:
        fields.append(("userhash", request.userhash))

    logger.debug(
        f"Using MIME type {request.mime_type} for file {request.file_name}"
    )
    return MultipartEncoder(fields=fields)
