"""Credential extraction and constant-time secret comparison."""

import hmac
import logging
from typing import Any, Mapping, Optional, Tuple

from ....config.constants import CredentialFields
from ....core.exceptions import AuthenticationError
from ..entities import Account

logger = logging.getLogger(__name__)

# Compared against when the principal is unknown, so both paths do the same work
_DUMMY_SECRET = "neo-realms-dummy-secret"


def extract_username_password(credentials: Any) -> Optional[Tuple[str, str]]:
    """Pull ``username`` and ``password`` strings out of a credentials mapping.

    Returns:
        The pair, or None when the shape is wrong
    """
    if not isinstance(credentials, Mapping):
        return None
    username = credentials.get(CredentialFields.USERNAME)
    password = credentials.get(CredentialFields.PASSWORD)
    if not isinstance(username, str) or not isinstance(password, str) or not username:
        return None
    return username, password


def secrets_match(stored: Optional[str], supplied: str) -> bool:
    """Compare secrets in constant time.

    A missing ``stored`` secret is compared against a dummy value and
    always yields False.
    """
    expected = stored if stored is not None else _DUMMY_SECRET
    matched = hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))
    return matched and stored is not None


def authenticate_account(
    accounts: Mapping[str, Account],
    credentials: Any,
    realm_name: str,
) -> str:
    """Authenticate credentials against an account mapping.

    Args:
        accounts: principal -> account, as published in the realm snapshot
        credentials: Mapping with ``username`` and ``password``
        realm_name: Realm name for logs and error details

    Returns:
        The authenticated principal

    Raises:
        AuthenticationError: On any rejection, with the same payload
    """
    pair = extract_username_password(credentials)
    if pair is None:
        # Still burn a comparison so malformed requests look like the others
        secrets_match(None, "")
        logger.debug(f"Login rejected by realm '{realm_name}': malformed credentials")
        raise AuthenticationError(realm=realm_name)

    username, password = pair
    account = accounts.get(username)
    matched = secrets_match(account.secret if account else None, password)
    if not matched or account is None or not account.enabled:
        logger.debug(f"Login rejected by realm '{realm_name}' for '{username}'")
        raise AuthenticationError(realm=realm_name)

    logger.debug(f"Login accepted by realm '{realm_name}' for '{username}'")
    return account.principal
