#!/usr/bin/env python3
"""Pytest configuration and shared fixtures."""

import os
import sys
import pytest
import requests
from unittest.mock import Mock, patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catbox_uploader.config import config
from catbox_uploader.credential_store import CredentialStore


class FakeCatbox:
    """Stands in for requests.Session.post and drains the body like a transport would."""

    def __init__(self, text="https://files.catbox.moe/abc123.png", status_code=200, chunk_size=256):
        self.text = text
        self.status_code = status_code
        self.chunk_size = chunk_size
        self.calls = []

    def __call__(self, url, data=None, headers=None, **kwargs):
        body = b""
        while True:
            chunk = data.read(self.chunk_size)
            if not chunk:
                break
            body += chunk
        self.calls.append({"url": url, "body": body, "headers": headers})

        response = Mock()
        response.status_code = self.status_code
        response.text = self.text
        if self.status_code >= 400:
            response.raise_for_status.side_effect = requests.exceptions.HTTPError(
                response=response
            )
        else:
            response.raise_for_status = Mock()
        return response


@pytest.fixture
def fake_catbox():
    """Patch Session.post with a FakeCatbox returning a URL."""
    fake = FakeCatbox()
    with patch.object(requests.Session, "post", side_effect=fake) as mock_post:
        fake.mock = mock_post
        yield fake


@pytest.fixture
def temp_file(tmp_path):
    """Create a temporary file for upload testing."""
    path = tmp_path / "test.txt"
    path.write_bytes(b"Test file content for upload testing")
    return str(path)


@pytest.fixture
def photo_file(tmp_path):
    """A 1024 byte file named photo.png."""
    path = tmp_path / "photo.png"
    path.write_bytes(b"x" * 1024)
    return str(path)


@pytest.fixture
def sparse_file(tmp_path):
    """Factory for large files that take no disk space."""

    def make(name, size):
        path = tmp_path / name
        with open(path, "wb") as f:
            f.truncate(size)
        return str(path)

    return make


@pytest.fixture
def userhash_path(tmp_path, monkeypatch):
    """Point the configured userhash file at a temporary location."""
    path = str(tmp_path / "config" / ".userhash")
    monkeypatch.setitem(config._config, "userhash_file", path)
    return path


@pytest.fixture
def credential_store(userhash_path):
    return CredentialStore(userhash_path)
