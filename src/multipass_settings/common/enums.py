from enum import Enum


class Role(Enum):
    """Application roles that own a settings namespace.

    The client is the interactive front end, the daemon is the background
    service. Each role has its own built-in keys, backing file, and
    namespace prefix for platform-supplied extras.
    """

    CLIENT = "client"
    DAEMON = "daemon"

    @property
    def extras_prefix(self) -> str:
        """Prefix that platform extra keys must carry to belong to this role."""
        return "client." if self is Role.CLIENT else "local."


class SettingFormat(Enum):
    """Formats a setting value can be constrained to."""

    STRING = "string"  # unconstrained
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    KEY_SEQUENCE = "key-sequence"
    INSTANCE_NAME = "instance-name"
    CHOICE = "choice"


class ErrorKind(Enum):
    """Kinds of settings failures, for callers that branch instead of catching."""

    UNRECOGNIZED_SETTING = "unrecognized-setting"
    INVALID_SETTING_VALUE = "invalid-setting-value"
    DUPLICATE_SETTING = "duplicate-setting"
    PERSISTENCE = "persistence"
