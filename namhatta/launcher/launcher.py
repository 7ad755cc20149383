"""
Process launcher: run a target script as a supervised child process.

The launcher spawns one interpreter process against a script with stdio
inherited from the parent, forwards SIGINT/SIGTERM to it once, and turns
the child's termination status into the parent's exit code:

- spawn failure (missing script, missing interpreter, any OSError): 1
- normal exit with code c: c
- killed by signal N: 128 + N
"""

from __future__ import annotations

import os
import signal
import subprocess
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import FrameType, MappingProxyType
from typing import Any

from namhatta.exceptions import LaunchError, SpawnError
from namhatta.log import Logger, LoggerFactory, create_root_lg

from .state import LaunchState
from .targets import LaunchTarget

FORWARDED_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)
SPAWN_FAILURE_EXIT_CODE = 1


def exit_code_from_returncode(returncode: int | None) -> int:
    """
    Map a child's return code to the launcher's exit code.

    Normal exits pass through unchanged. A child killed by signal N
    (reported by subprocess as -N) maps to 128 + N. An unknown status
    maps to 1.
    """
    if returncode is None:
        return SPAWN_FAILURE_EXIT_CODE
    if returncode < 0:
        return 128 - returncode
    return returncode


def merge_env(base: Mapping[str, str], overrides: Mapping[str, str]) -> Mapping[str, str]:
    """Read-only merge of overrides over base; neither input is modified."""
    merged = dict(base)
    merged.update(overrides)
    return MappingProxyType(merged)


@dataclass(frozen=True)
class LaunchResult:
    """Outcome of ProcessLauncher.run()."""

    exit_code: int
    state: LaunchState
    forwarded_signal: signal.Signals | None = None
    spawn_error: str | None = None

    @property
    def spawn_failed(self) -> bool:
        return self.spawn_error is not None


class LaunchHandle:
    """
    Handle on a running child process.

    Owns the RUNNING -> TERMINATING -> EXITED part of the state machine.
    """

    def __init__(self, process: subprocess.Popen, target: LaunchTarget) -> None:
        self._process = process
        self._target = target
        self._state = LaunchState.RUNNING
        self._forwarded: signal.Signals | None = None
        self._exit_code: int | None = None

    @property
    def pid(self) -> int:
        return self._process.pid

    @property
    def target(self) -> LaunchTarget:
        return self._target

    @property
    def state(self) -> LaunchState:
        return self._state

    @property
    def forwarded_signal(self) -> signal.Signals | None:
        """Signal delivered to the child, if any."""
        return self._forwarded

    @property
    def exit_code(self) -> int | None:
        """Mapped exit code once the child has exited, else None."""
        return self._exit_code

    def forward_signal(self, signum: int) -> bool:
        """
        Forward signum to the child unless a signal was already forwarded.

        Returns:
            True if the signal was sent. Signals arriving while TERMINATING
            or after EXITED are dropped. A child that has already exited is
            not signalled and the signal is not recorded as forwarded.
        """
        if self._state is not LaunchState.RUNNING:
            return False
        # Exited but not yet reaped by wait()
        if self._process.poll() is not None:
            return False

        self._state = LaunchState.TERMINATING
        try:
            self._process.send_signal(signum)
        except ProcessLookupError:
            return False
        self._forwarded = signal.Signals(signum)
        return True

    def wait(self) -> int:
        """Block until the child exits and return the mapped exit code."""
        if self._exit_code is None:
            returncode = self._process.wait()
            self._exit_code = exit_code_from_returncode(returncode)
            self._state = LaunchState.EXITED
        return self._exit_code


class ProcessLauncher:
    """
    Runs one LaunchTarget as a supervised child process.

    The parent's own environment is never modified: the child gets a merged
    copy. Each launcher instance supervises exactly one child.

    Example:
        launcher = ProcessLauncher(lg, DEV_TARGET, base_dir=project_root)
        result = launcher.run()
        sys.exit(result.exit_code)
    """

    def __init__(
        self,
        lg: Logger,
        target: LaunchTarget,
        base_dir: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
        popen: Callable[..., subprocess.Popen] = subprocess.Popen,
    ) -> None:
        """
        Args:
            lg: Logger for launcher messages
            target: What to run
            base_dir: Directory relative script paths are resolved against
                (default: current directory)
            environ: Parent environment to merge overrides into
                (default: os.environ at launch time)
            popen: Process factory (subprocess.Popen)
        """
        self._lg = lg
        self._target = target
        self._base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self._environ = environ
        self._popen = popen
        self._handle: LaunchHandle | None = None
        self._state = LaunchState.STARTING
        self._pending_signal: int | None = None
        self._previous_handlers: dict[signal.Signals, Any] = {}

    @property
    def target(self) -> LaunchTarget:
        return self._target

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @property
    def handle(self) -> LaunchHandle | None:
        return self._handle

    @property
    def state(self) -> LaunchState:
        if self._handle is not None:
            return self._handle.state
        return self._state

    def resolve_script(self, script_path: str | Path | None = None) -> Path:
        """Resolve script_path (default: the target's script) against base_dir."""
        path = Path(script_path if script_path is not None else self._target.script)
        if not path.is_absolute():
            path = self._base_dir / path
        return path

    def build_command(self, script: Path) -> list[str]:
        return [*self._target.interpreter, str(script)]

    def build_env(self, env_overrides: Mapping[str, str] | None = None) -> Mapping[str, str]:
        """Child environment: parent environment with overrides applied."""
        base = self._environ if self._environ is not None else os.environ
        overrides = self._target.env if env_overrides is None else env_overrides
        return merge_env(base, overrides)

    def launch(
        self,
        script_path: str | Path | None = None,
        env_overrides: Mapping[str, str] | None = None,
    ) -> LaunchHandle:
        """
        Spawn the child process.

        The child inherits stdin, stdout and stderr; nothing is captured.

        Args:
            script_path: Script to run (default: the target's script)
            env_overrides: Environment overrides (default: the target's env)

        Returns:
            Handle on the running child

        Raises:
            SpawnError: If the script does not exist or the process can't start
            LaunchError: If this launcher already launched a child
        """
        if self._state is not LaunchState.STARTING or self._handle is not None:
            raise LaunchError("launcher already used", target=self._target.name)

        script = self.resolve_script(script_path)
        if not script.is_file():
            self._state = LaunchState.EXITED
            raise SpawnError(self._target.name, "script not found", script=str(script))

        command = self.build_command(script)
        env = self.build_env(env_overrides)
        self._lg.debug("spawning child", extra={"command": command})

        try:
            process = self._popen(command, env=dict(env))
        except OSError as e:
            self._state = LaunchState.EXITED
            raise SpawnError(
                self._target.name, e.strerror or str(e), command=command[0]
            ) from e

        self._handle = LaunchHandle(process, self._target)
        self._lg.debug("child started", extra={"pid": process.pid})
        return self._handle

    def run(
        self,
        script_path: str | Path | None = None,
        env_overrides: Mapping[str, str] | None = None,
    ) -> LaunchResult:
        """
        Launch the target, forward signals while it runs, and wait for it.

        Arguments are passed to launch().

        Signal handlers are installed before spawning, so a signal that
        arrives while the child is starting is forwarded once it exists.
        Previous handlers are restored afterwards.
        """
        self._log_banner()
        self._install_signal_handlers()
        try:
            return self._run(script_path, env_overrides)
        finally:
            self._restore_signal_handlers()

    def _run(
        self,
        script_path: str | Path | None,
        env_overrides: Mapping[str, str] | None,
    ) -> LaunchResult:
        try:
            handle = self.launch(script_path, env_overrides)
        except SpawnError as e:
            self._lg.error(
                self._target.failure_message,
                extra={"target": self._target.name, "exception": e},
            )
            return LaunchResult(
                exit_code=SPAWN_FAILURE_EXIT_CODE,
                state=LaunchState.EXITED,
                spawn_error=str(e),
            )

        if self._pending_signal is not None:
            self._forward(self._pending_signal)

        exit_code = handle.wait()
        self._report_exit(exit_code)
        return LaunchResult(
            exit_code=exit_code,
            state=handle.state,
            forwarded_signal=handle.forwarded_signal,
        )

    def _log_banner(self) -> None:
        extra: dict[str, Any] = {"cwd": str(self._base_dir)}
        if self._target.env:
            extra["env"] = [f"{k}={v}" for k, v in sorted(self._target.env.items())]
        self._lg.info(self._target.banner or f"launching {self._target.name}", extra=extra)

    def _report_exit(self, exit_code: int) -> None:
        if exit_code == 0 and self._target.success_message:
            self._lg.info(self._target.success_message)
        else:
            self._lg.debug(self._target.exit_message, extra={"code": exit_code})

    def _install_signal_handlers(self) -> None:
        if threading.current_thread() is not threading.main_thread():
            self._lg.debug("not on the main thread, signal forwarding disabled")
            return
        for sig in FORWARDED_SIGNALS:
            self._previous_handlers[sig] = signal.signal(sig, self._handle_signal)

    def _restore_signal_handlers(self) -> None:
        for sig, handler in self._previous_handlers.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
        self._previous_handlers.clear()

    def _handle_signal(self, signum: int, frame: FrameType | None) -> None:
        """Forward a stop signal to the child; queue it if still starting."""
        if self._handle is None:
            if self._state.accepts_signal and self._pending_signal is None:
                self._pending_signal = signum
            return
        self._forward(signum)

    def _forward(self, signum: int) -> None:
        assert self._handle is not None
        if self._handle.forward_signal(signum):
            self._lg.info(
                self._target.stop_message,
                extra={"signal": signal.Signals(signum).name, "pid": self._handle.pid},
            )


def run_target(
    target: LaunchTarget,
    base_dir: str | Path | None = None,
    lg: Logger | None = None,
) -> int:
    """
    Run target under a ProcessLauncher and return the exit code to use.

    Creates an info-level root logger when lg is not given.
    """
    if lg is None:
        lg = create_root_lg("info")
    launcher_lg = LoggerFactory.derive(lg, ["launcher", target.name])
    return ProcessLauncher(launcher_lg, target, base_dir=base_dir).run().exit_code
