"""Model package for pblaunch."""

from pblaunch.models.launch_plan import LaunchPlan
from pblaunch.models.launcher_config import LauncherConfig

__all__ = [
    "LaunchPlan",
    "LauncherConfig",
]
