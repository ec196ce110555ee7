"""
common/credentials.py

AWS credential resolution for request signing.
"""

import logging
from typing import Any, Optional

from botocore.credentials import Credentials
from botocore.session import Session, get_session

from .exceptions import CredentialError

logger = logging.getLogger(__name__)

AWS_CREDENTIALS_DOCS = (
    "https://boto3.amazonaws.com/v1/documentation/api/latest/guide/credentials.html"
)


def get_default_credentials(session: Optional[Session] = None) -> Credentials:
    """
    Use botocore's default provider chain to find AWS credentials.

    The chain covers environment variables, the shared credentials and
    config files (honouring AWS_PROFILE), and container/instance metadata.
    """
    session = session or get_session()
    credentials = session.get_credentials()
    if credentials is None:
        raise CredentialError(
            "AWS credentials not found by botocore. To learn how to set AWS "
            f"credentials for your environment, please visit {AWS_CREDENTIALS_DOCS}"
        )
    logger.debug(f"Resolved AWS credentials via {getattr(credentials, 'method', 'unknown')}")
    return credentials


def resolve_credentials(explicit: Optional[Any] = None, session: Optional[Session] = None) -> Any:
    """Return explicit credentials unchanged, else discover them."""
    if explicit is not None:
        return explicit
    return get_default_credentials(session)
