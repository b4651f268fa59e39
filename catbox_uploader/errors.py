#!/usr/bin/env python3
"""
Error types for the Catbox uploader.

Every error is terminal for the current invocation. They propagate up to
main(), which logs the message and exits with the error's exit code.
"""


class CatboxError(Exception):
    """Base class for all uploader errors."""

    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FileNotFound(CatboxError):
    """The file to upload does not exist."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__("File does not exist.")


class FileStatError(CatboxError):
    """The file exists but could not be inspected."""

    def __init__(self, file_path: str, reason):
        self.file_path = file_path
        super().__init__(f"Error checking file: {reason}")


class SizeLimitExceeded(CatboxError):
    """The file is larger than the target service accepts."""

    def __init__(self, target, file_size: int):
        self.target = target
        self.file_size = file_size
        super().__init__(target.size_limit_message)


class InvalidTimeOption(CatboxError):
    def __init__(self, time_option: str):
        self.time_option = time_option
        super().__init__("ERROR: Invalid time option. Use --help for usage example.")


class ConflictingOptions(CatboxError):
    def __init__(self):
        super().__init__(
            "Only one option (--help, --userhash, --anon, or --time) can be used at a time."
        )


class MissingFilePath(CatboxError):
    def __init__(self):
        super().__init__("ERROR: No file path specified. Use --help for usage example.")


class UsageError(CatboxError):
    """Any other command line parsing problem."""


class CredentialFileError(CatboxError):
    """The userhash file could not be read or written."""

    def __init__(self, path: str, reason):
        self.path = path
        super().__init__(f"Error accessing userhash file {path}: {reason}")


class UploadError(CatboxError):
    """Network, transport or HTTP status failure during upload."""

    def __init__(self, reason):
        super().__init__(f"Error uploading file: {reason}")


class UploadCancelled(CatboxError):
    """The user declined to continue. Not a failure."""

    exit_code = 0
