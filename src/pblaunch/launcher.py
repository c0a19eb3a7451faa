"""Turn a mode, passthrough arguments and config into a LaunchPlan."""

import logging
import os
from collections.abc import Sequence

from pblaunch.arguments import build_arguments
from pblaunch.binary import ensure_executable, resolve_executable
from pblaunch.models import LaunchPlan, LauncherConfig

log = logging.getLogger(__name__)


def build_launch_plan(
    mode: str,
    extra_args: Sequence[str],
    config: LauncherConfig,
    base_dir: str | None = None,
) -> LaunchPlan | None:
    """Resolve the binary and build its invocation. Returns None if no binary exists."""
    executable = resolve_executable(config, base_dir=base_dir)
    if executable is None:
        return None

    ensure_executable(executable)
    arguments = build_arguments(mode, extra_args, config)
    plan = LaunchPlan(executable=executable, arguments=arguments, env=dict(os.environ))
    log.debug("plan argv=%s", plan.argv)
    return plan
