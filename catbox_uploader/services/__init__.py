#!/usr/bin/env python3
"""
Services package initialization.
"""

from .credential_service import (
    CredentialAction,
    CredentialDecision,
    CredentialService,
    resolve_credential,
)
from .upload_service import UploadService

__all__ = [
    "CredentialAction",
    "CredentialDecision",
    "CredentialService",
    "resolve_credential",
    "UploadService",
]
