"""Shared constants for pblaunch."""

BINARY_STEM = "pocketbase"
BASE_SUBCOMMAND = "serve"

MODES = ("dev", "start")
DEFAULT_MODE = "dev"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = "8090"

ENV_BINARY = "PB_BINARY"
ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_DATA_DIR = "PB_DATA_DIR"
ENV_DATABASE_URL = "DATABASE_URL"

# Seconds between the graceful stop signal and the forced kill.
GRACE_PERIOD_SECONDS = 5.0

LAUNCHER_PREFIX = "[launch]"
CHILD_PREFIX = "[pocketbase]"
