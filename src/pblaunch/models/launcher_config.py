"""Configuration model for pblaunch."""

from pydantic import BaseModel, ConfigDict

from pblaunch.constants import DEFAULT_HOST, DEFAULT_PORT


class LauncherConfig(BaseModel):
    """Runtime configuration read from the environment."""

    model_config = ConfigDict(frozen=True)

    binary: str | None = None
    host: str = DEFAULT_HOST
    port: str = DEFAULT_PORT
    data_dir: str | None = None
    database_url: str | None = None
