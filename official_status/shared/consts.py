from enum import Enum

DEFAULT_STATUS_URL = "https://status.claude.com/api/v2/status.json"
DEFAULT_TIMEOUT_MS = 15000
CHECK_OPERATION = "check_official_status"


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
