"""Launch lifecycle states."""

from enum import Enum


class LaunchState(Enum):
    """
    Lifecycle of one supervised child process.

    STARTING -> RUNNING -> TERMINATING -> EXITED, or STARTING -> EXITED when
    the child could not be spawned. TERMINATING is entered when a signal has
    been forwarded; it also acts as the latch that keeps the signal from being
    forwarded a second time.
    """

    STARTING = "starting"
    RUNNING = "running"
    TERMINATING = "terminating"
    EXITED = "exited"

    @property
    def accepts_signal(self) -> bool:
        """Whether a signal received now should be forwarded (or queued)."""
        return self in (LaunchState.STARTING, LaunchState.RUNNING)
