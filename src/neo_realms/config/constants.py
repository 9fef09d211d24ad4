"""Constants and enums for neo-realms.

Tokens of the permission wire format, realm type tags, and the default
resource names used when a realm configuration omits them.
"""

from enum import Enum
from typing import Final


class PermissionTokens:
    """Permission string wire format tokens."""

    WILDCARD: Final[str] = "*"
    PART_DIVIDER: Final[str] = ":"
    SUBPART_DIVIDER: Final[str] = ","


class RealmType(str, Enum):
    """Built-in realm implementations selectable by type tag."""

    PROPERTIES = "properties"
    MEMORY = "memory"
    DATABASE = "database"


class PropertiesDefaults:
    """Defaults for the properties-file realm."""

    RESOURCE_PATH: Final[str] = "classpath:realm-users.properties"
    CLASSPATH_PREFIX: Final[str] = "classpath:"
    FILE_PREFIX: Final[str] = "file:"
    USER_PREFIX: Final[str] = "user."
    ROLE_PREFIX: Final[str] = "role."


class DatabaseDefaults:
    """Default queries for the database realm.

    Each query is parameterised with asyncpg positional placeholders.
    """

    AUTHENTICATION_QUERY: Final[str] = (
        "SELECT password, enabled FROM users WHERE username = $1"
    )
    USER_ROLES_QUERY: Final[str] = "SELECT username, role_name FROM user_roles"
    ROLE_PERMISSIONS_QUERY: Final[str] = (
        "SELECT role_name, permission FROM roles_permissions"
    )
    MIN_POOL_SIZE: Final[int] = 1
    MAX_POOL_SIZE: Final[int] = 10
    COMMAND_TIMEOUT_SECONDS: Final[float] = 10.0


class CredentialFields:
    """Keys recognised in a credentials mapping."""

    USERNAME: Final[str] = "username"
    PASSWORD: Final[str] = "password"
