"""Locate the PocketBase binary and make sure it can be executed."""

import logging
import os
import platform as platform_module
import stat
import sys

from pblaunch.constants import BINARY_STEM, ENV_BINARY
from pblaunch.models import LauncherConfig

log = logging.getLogger(__name__)

# platform.machine() values mapped to the arch names used in release folders.
ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "armv7l": "arm",
    "armv6l": "arm",
}


def _is_windows(platform: str) -> bool:
    return platform == "win32"


def platform_tag(platform: str | None = None, machine: str | None = None) -> str:
    """Return the `<platform>-<arch>` folder name, e.g. `linux-x64`."""
    plat = sys.platform if platform is None else platform
    if plat.startswith("linux"):
        plat = "linux"
    raw_arch = (platform_module.machine() if machine is None else machine).lower()
    arch = ARCH_ALIASES.get(raw_arch, raw_arch or "unknown")
    return f"{plat}-{arch}"


def binary_name(platform: str | None = None) -> str:
    plat = sys.platform if platform is None else platform
    return f"{BINARY_STEM}.exe" if _is_windows(plat) else BINARY_STEM


def candidate_paths(
    base_dir: str | None = None,
    platform: str | None = None,
    machine: str | None = None,
) -> list[str]:
    """Return candidate binary locations in preference order."""
    base = os.getcwd() if base_dir is None else base_dir
    plat = sys.platform if platform is None else platform
    name = binary_name(plat)

    candidates = [
        os.path.join(base, name),
        os.path.join(base, BINARY_STEM, name),
        os.path.join(base, "bin", name),
        os.path.join(base, "bin", platform_tag(plat, machine), name),
    ]
    if _is_windows(plat):
        # Renamed or WSL-style binaries without the .exe suffix.
        candidates.append(os.path.join(base, BINARY_STEM))
        candidates.append(os.path.join(base, "bin", BINARY_STEM))
    return candidates


def resolve_executable(
    config: LauncherConfig,
    base_dir: str | None = None,
    platform: str | None = None,
    machine: str | None = None,
) -> str | None:
    """Return the first existing binary path, or None when nothing is found."""
    if config.binary:
        if os.path.isfile(config.binary):
            log.debug("using %s=%s", ENV_BINARY, config.binary)
            return config.binary
        log.warning("%s=%s does not exist, searching default locations", ENV_BINARY, config.binary)

    for path in candidate_paths(base_dir, platform, machine):
        if os.path.isfile(path):
            log.debug("found binary at %s", path)
            return path
        log.debug("no binary at %s", path)
    return None


def ensure_executable(path: str) -> None:
    """Add the execute bits on POSIX. Failures are left for the spawn to report."""
    if os.name == "nt":
        return
    if os.access(path, os.X_OK):
        return
    try:
        mode = os.stat(path).st_mode
        os.chmod(path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        log.debug("made %s executable", path)
    except OSError as e:
        log.debug("chmod %s failed: %s", path, e)


def missing_binary_help(platform: str | None = None, machine: str | None = None) -> str:
    """Return remediation instructions for a missing binary."""
    tag = platform_tag(platform, machine)
    return "\n".join(
        [
            "",
            "[Error] PocketBase binary not found.",
            "Place the PocketBase binary in one of these locations:",
            "  - ./pocketbase (or pocketbase.exe on Windows)",
            "  - ./pocketbase/pocketbase",
            "  - ./bin/pocketbase",
            f"  - ./bin/{tag}/pocketbase",
            "",
            f"Alternatively, set an absolute path via the {ENV_BINARY} environment variable.",
            f'Example:\n  {ENV_BINARY}="/abs/path/to/pocketbase" launch start',
            "",
            "On macOS/Linux, make it executable:",
            "  chmod +x ./pocketbase",
            "",
            "Tip: Download the correct PocketBase binary for your OS/CPU from the "
            "official releases,",
            "place/rename it as noted above, then re-run your command.",
            "",
        ]
    )
