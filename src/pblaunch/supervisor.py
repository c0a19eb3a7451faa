"""Spawn the backend binary and relay signals and exit codes.

The child inherits stdin, stdout and stderr, so interactive output from the
binary reaches the terminal untouched. While the launcher waits, SIGINT and
SIGTERM are intercepted: the first one asks the child to stop gracefully and
arms a timer that kills it if it is still running after the grace period.
"""

import logging
import os
import signal
import subprocess
import sys
import threading

from pblaunch.binary import missing_binary_help
from pblaunch.constants import CHILD_PREFIX, GRACE_PERIOD_SECONDS, LAUNCHER_PREFIX
from pblaunch.models import LaunchPlan

log = logging.getLogger(__name__)

FORWARDED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"


def exit_code_for(returncode: int) -> int:
    """Map a Popen returncode to the launcher's exit code.

    Negative return codes mean the child died from a signal, which counts as
    a clean shutdown.
    """
    if returncode < 0:
        return 0
    return returncode


class Supervisor:
    """Own a single child process from spawn to exit."""

    def __init__(self, plan: LaunchPlan, grace_period: float = GRACE_PERIOD_SECONDS) -> None:
        self._plan = plan
        self._grace_period = grace_period
        self._process: subprocess.Popen | None = None
        self._kill_timer: threading.Timer | None = None
        self._stopping = False

    def spawn(self) -> subprocess.Popen:
        self._process = subprocess.Popen(self._plan.argv, env=self._plan.env)
        log.debug("spawned pid=%d", self._process.pid)
        return self._process

    def shutdown(self, signum: int) -> None:
        """Ask the child to stop and arm the forced-kill timer."""
        process = self._process
        if process is None or process.poll() is not None:
            return
        if self._stopping:
            log.debug("already stopping, ignoring %s", signal_name(signum))
            return
        self._stopping = True

        print(
            f"\n{LAUNCHER_PREFIX} received {signal_name(signum)}, shutting down PocketBase...",
            flush=True,
        )
        try:
            if os.name == "nt":
                process.terminate()
            else:
                process.send_signal(signal.SIGINT)
        except OSError as e:
            log.debug("graceful stop failed: %s", e)

        self._kill_timer = threading.Timer(self._grace_period, self._force_kill)
        self._kill_timer.daemon = True
        self._kill_timer.start()

    def _force_kill(self) -> None:
        process = self._process
        if process is None or process.poll() is not None:
            return
        log.warning(
            "child did not exit within %.1fs, killing pid %d", self._grace_period, process.pid
        )
        try:
            process.kill()
        except OSError as e:
            log.debug("kill failed: %s", e)

    def _on_signal(self, signum, _frame) -> None:
        self.shutdown(signum)

    def install_signal_handlers(self) -> dict:
        previous = {}
        for signum in FORWARDED_SIGNALS:
            previous[signum] = signal.signal(signum, self._on_signal)
        return previous

    @staticmethod
    def restore_signal_handlers(previous: dict) -> None:
        for signum, handler in previous.items():
            # None means the previous handler was not installed from Python.
            if handler is not None:
                signal.signal(signum, handler)

    def wait(self) -> int:
        """Block until the child exits and return the launcher's exit code."""
        if self._process is None:
            raise RuntimeError("child process has not been spawned")
        returncode = self._process.wait()
        if self._kill_timer is not None:
            self._kill_timer.cancel()

        if returncode < 0:
            print(f"{CHILD_PREFIX} exited due to signal: {signal_name(-returncode)}", flush=True)
        else:
            print(f"{CHILD_PREFIX} exited with code: {returncode}", flush=True)
        return exit_code_for(returncode)

    def run(self) -> int:
        """Spawn the child, relay signals until it exits, and return the exit code."""
        print(f"{LAUNCHER_PREFIX} launching: {' '.join(self._plan.argv)}", flush=True)

        try:
            self.spawn()
        except OSError as e:
            print(f"{CHILD_PREFIX} failed to start: {e}", file=sys.stderr)
            if isinstance(e, FileNotFoundError):
                print(missing_binary_help(), file=sys.stderr)
            return 1

        previous = self.install_signal_handlers()
        try:
            return self.wait()
        finally:
            self.restore_signal_handlers(previous)
