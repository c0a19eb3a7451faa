"""Launch plan model for the supervised child process."""

from dataclasses import dataclass


@dataclass
class LaunchPlan:
    """How to spawn the backend binary for a single run."""

    executable: str
    arguments: list[str]
    env: dict[str, str]

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.arguments]
