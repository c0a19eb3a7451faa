"""Configuration for pblaunch."""

import logging
import os
from collections.abc import Mapping

from pblaunch.constants import (
    ENV_BINARY,
    ENV_DATA_DIR,
    ENV_DATABASE_URL,
    ENV_HOST,
    ENV_PORT,
)
from pblaunch.models import LauncherConfig

log = logging.getLogger(__name__)

ENV_FIELDS = {
    ENV_BINARY: "binary",
    ENV_HOST: "host",
    ENV_PORT: "port",
    ENV_DATA_DIR: "data_dir",
    ENV_DATABASE_URL: "database_url",
}


def load_config(environ: Mapping[str, str] | None = None) -> LauncherConfig:
    """Build a LauncherConfig from environment variables.

    Empty values count as unset so the model defaults apply.
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for env_key, field in ENV_FIELDS.items():
        raw = env.get(env_key, "")
        if raw.strip():
            values[field] = raw
    log.debug("config from env: %s", sorted(values))
    return LauncherConfig(**values)
