"""
Tests for AWS credential resolution
"""

from unittest.mock import MagicMock

import pytest

from amb_web3.common import credentials as credentials_module
from amb_web3.common.credentials import get_default_credentials, resolve_credentials
from amb_web3.common.exceptions import CredentialError


def test_explicit_credentials_returned_by_identity(credentials, monkeypatch):
    lookup = MagicMock()
    monkeypatch.setattr(credentials_module, "get_default_credentials", lookup)
    assert resolve_credentials(credentials) is credentials
    lookup.assert_not_called()


def test_discovered_credentials(credentials):
    session = MagicMock()
    session.get_credentials.return_value = credentials
    assert resolve_credentials(None, session=session) is credentials
    session.get_credentials.assert_called_once_with()


def test_missing_credentials_raise():
    session = MagicMock()
    session.get_credentials.return_value = None
    with pytest.raises(CredentialError) as exc_info:
        get_default_credentials(session)
    assert "https://" in str(exc_info.value)


def test_default_session_is_botocore(credentials, monkeypatch):
    session = MagicMock()
    session.get_credentials.return_value = credentials
    monkeypatch.setattr(credentials_module, "get_session", lambda: session)
    assert get_default_credentials() is credentials
