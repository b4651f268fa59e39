#!/usr/bin/env python3
"""
Credential Service Module

Decides which userhash a Catbox upload uses and runs the interactive
prompts that go with that decision.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..credential_store import CredentialStore
from ..errors import UploadCancelled
from ..utils import confirm_action, print_info, print_success

logger = logging.getLogger("catbox_uploader")


class CredentialAction(Enum):
    """What to do with the userhash before uploading."""

    ANONYMOUS = "anonymous"
    EXPLICIT = "explicit"
    OFFER_SAVE = "offer_save"
    STORED = "stored"
    ASK_ANONYMOUS = "ask_anonymous"


@dataclass(frozen=True)
class CredentialDecision:
    action: CredentialAction
    userhash: Optional[str] = None


def resolve_credential(
    anon: bool, userhash: Optional[str], stored: Optional[str]
) -> CredentialDecision:
    """
    Pick the userhash for a permanent upload. Performs no I/O.

    Args:
        anon: Whether --anon was given
        userhash: Value of --userhash, if given
        stored: Userhash loaded from the credential store, if any

    Returns:
        CredentialDecision describing the token and any prompt required
    """
    if anon:
        return CredentialDecision(CredentialAction.ANONYMOUS)
    if userhash:
        if not stored:
            return CredentialDecision(CredentialAction.OFFER_SAVE, userhash)
        return CredentialDecision(CredentialAction.EXPLICIT, userhash)
    if stored:
        return CredentialDecision(CredentialAction.STORED, stored)
    return CredentialDecision(CredentialAction.ASK_ANONYMOUS)


class CredentialService:
    """Service for the interactive side of userhash handling."""

    def __init__(self, store: CredentialStore):
        """
        Initialize the credential service.

        Args:
            store: Credential store holding the default userhash
        """
        self.store = store

    def apply(self, decision: CredentialDecision) -> Optional[str]:
        """
        Run any prompt the decision calls for.

        Args:
            decision: Result of resolve_credential

        Returns:
            The userhash to upload with, or None for an anonymous upload

        Raises:
            UploadCancelled: If the user declines an anonymous upload
        """
        logger.debug(f"Credential decision: {decision.action.value}")

        if decision.action is CredentialAction.OFFER_SAVE:
            if confirm_action(
                f'No default userhash. Would you like to set the inputted userhash '
                f'"{decision.userhash}" as default for future uploads? (y/n)',
            ):
                self.store.save(decision.userhash)
                print_success(f'Userhash "{decision.userhash}" saved as default.')
            else:
                print_info(f'Userhash "{decision.userhash}" not saved.')

        elif decision.action is CredentialAction.ASK_ANONYMOUS:
            if not confirm_action(
                "No userhash inputted. Would you like to upload anyways? (y/n)",
            ):
                raise UploadCancelled(
                    "Upload cancelled. You may set a default userhash by uploading "
                    "again using --userhash followed by your userhash."
                )
            print_info("Uploading anonymously.")

        return decision.userhash

    def save_default(self, userhash: str) -> None:
        """
        Store a userhash as the default without uploading anything.

        Args:
            userhash: The userhash to store
        """
        self.store.save(userhash)
        print_success(f'Userhash "{userhash}" saved as default.')
