"""Properties-file parsing for the properties realm.

Reads the ``.properties`` dialect used for credential files::

    # users: password followed by roles
    user.paulo = secret,administrator
    role.administrator = *
    role.editor = newsletter:edit:*

Supports ``#``/``!`` comments, ``=``/``:``/whitespace separators, backslash
escapes and line continuations.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple
from urllib.parse import unquote, urlparse

from ....config.constants import PropertiesDefaults
from ....core.exceptions import BackingStoreError
from ..entities import Account

logger = logging.getLogger(__name__)

_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_STORE = "properties"


def _logical_lines(lines: Iterable[str]) -> Iterator[str]:
    """Join continuation lines and drop blanks and comments."""
    pending: Optional[str] = None
    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if pending is None:
            line = line.lstrip()
            if not line or line[0] in "#!":
                continue
        else:
            line = pending + line.lstrip()

        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = line[:-1]
            continue

        pending = None
        yield line

    if pending is not None:
        yield pending


def _unescape(text: str) -> str:
    chars: List[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char != "\\" or index + 1 >= len(text):
            chars.append(char)
            index += 1
            continue

        escaped = text[index + 1]
        if escaped == "u" and index + 6 <= len(text):
            try:
                chars.append(chr(int(text[index + 2:index + 6], 16)))
                index += 6
                continue
            except ValueError:
                pass
        chars.append(_ESCAPES.get(escaped, escaped))
        index += 2
    return "".join(chars)


def _split_key_value(line: str) -> Tuple[str, str]:
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char.isspace():
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip()
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip()
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> Dict[str, str]:
    """Parse properties text into a key/value mapping. Later keys win."""
    entries: Dict[str, str] = {}
    for line in _logical_lines(text.splitlines()):
        key, value = _split_key_value(line)
        entries[key] = value
    return entries


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def build_accounts(
    entries: Dict[str, str],
) -> Tuple[List[Account], Dict[str, List[str]]]:
    """Turn parsed entries into accounts and a role -> permissions map.

    Keys prefixed ``role.`` define roles; keys prefixed ``user.`` (or carrying
    no known prefix) define users as ``password[,role...]``.

    Raises:
        BackingStoreError: If an entry cannot be interpreted
    """
    accounts: List[Account] = []
    role_permissions: Dict[str, List[str]] = {}

    for key, value in entries.items():
        if key.startswith(PropertiesDefaults.ROLE_PREFIX):
            role = key[len(PropertiesDefaults.ROLE_PREFIX):]
            if not role:
                raise BackingStoreError(
                    "Malformed role entry in properties file",
                    store=_STORE,
                    reason=f"empty role name in key '{key}'",
                )
            role_permissions[role] = _split_list(value)
            continue

        username = key
        if key.startswith(PropertiesDefaults.USER_PREFIX):
            username = key[len(PropertiesDefaults.USER_PREFIX):]
        if not username or not value:
            raise BackingStoreError(
                "Malformed user entry in properties file",
                store=_STORE,
                reason=f"missing username or password for key '{key}'",
            )

        password, _, role_list = value.partition(",")
        accounts.append(
            Account(
                principal=username,
                secret=password.strip(),
                roles=frozenset(_split_list(role_list)),
            )
        )

    return accounts, role_permissions


def resolve_properties_path(path: str, search_paths: Sequence[str] = ()) -> Path:
    """Resolve a ``classpath:``, ``file:`` or plain path to a file on disk.

    ``classpath:`` names are looked up in ``search_paths``, or in the current
    working directory followed by ``sys.path`` when none are given.

    Raises:
        BackingStoreError: If a ``classpath:`` resource cannot be found
    """
    if path.startswith(PropertiesDefaults.CLASSPATH_PREFIX):
        name = path[len(PropertiesDefaults.CLASSPATH_PREFIX):].lstrip("/")
        roots = list(search_paths) or [os.getcwd(), *sys.path]
        for root in roots:
            if not root:
                continue
            candidate = Path(root) / name
            if candidate.is_file():
                return candidate
        raise BackingStoreError(
            f"Properties resource not found: {path}",
            store=_STORE,
            reason="not found on search path",
        )

    if path.startswith(PropertiesDefaults.FILE_PREFIX):
        parsed = urlparse(path)
        return Path(unquote(parsed.path or path[len(PropertiesDefaults.FILE_PREFIX):]))

    return Path(path)


def read_properties_file(path: Path, encoding: str = "utf-8") -> Tuple[Dict[str, str], int]:
    """Read and parse a properties file.

    Returns:
        Parsed entries and the file's modification time in nanoseconds

    Raises:
        BackingStoreError: If the file cannot be read or decoded
    """
    try:
        mtime_ns = path.stat().st_mtime_ns
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise BackingStoreError(
            f"Cannot read properties file: {path}",
            store=_STORE,
            reason=str(e),
        ) from e

    entries = parse_properties(text)
    logger.debug(f"Read {len(entries)} entries from {path}")
    return entries, mtime_ns
