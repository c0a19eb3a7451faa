"""Build the PocketBase command line for a launch mode."""

from collections.abc import Sequence

from pblaunch.constants import BASE_SUBCOMMAND
from pblaunch.models import LauncherConfig


def build_arguments(
    mode: str, extra_args: Sequence[str], config: LauncherConfig
) -> list[str]:
    """Return the binary's arguments; extra_args are appended verbatim."""
    args = [BASE_SUBCOMMAND]

    if mode == "start":
        args.append(f"--http={config.host}:{config.port}")
        if config.data_dir:
            args.append(f"--dir={config.data_dir}")
        if config.database_url:
            args.append(f"--database={config.database_url}")

    args.extend(extra_args)
    return args
