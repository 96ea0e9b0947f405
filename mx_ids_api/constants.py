"""
Constants and configuration for the mx-ids REST service.

All values are loaded from environment variables prefixed with ``MX_IDS_``,
allowing the deployment environment to control behaviour without code
changes.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "MX_IDS_"


def bool_env_value(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }


# Interface and port of the service
SERVER_HOST = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}HOST", "0.0.0.0"
).strip()
SERVER_PORT = int(os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}PORT", 8090))

# Flask debug mode
SERVER_DEBUG = bool_env_value(f"{_DontChangeMe.MAIN_ENV_PREFIX}DEBUG")

# Default name of a logging file (empty = log to stderr only)
REST_API_LOG_FILE_NAME = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_FILENAME", ""
).strip()

# Default logging level
REST_API_LOG_LEVEL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO"
).strip()

# Default prefix for each endpoint
DEFAULT_API_PREFIX = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}EP_PREFIX", "/api"
).strip()

# Maximum number of identifiers accepted by the batch endpoint
MAX_BATCH_SIZE = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}MAX_BATCH_SIZE", 500)
)
