from enum import Enum

PROFILE_ENV_VAR = "APP_PROFILE"
CONFIG_DIR_ENV_VAR = "APP_CONFIG_DIR"

BASE_CONFIG_FILE = "application.env"
PROFILE_CONFIG_TEMPLATE = "application-{profile}.env"


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
