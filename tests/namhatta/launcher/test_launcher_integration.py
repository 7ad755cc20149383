"""
Integration tests for the process launcher with real child processes.

Children are small Python scripts written to tmp_path and run under the
current interpreter.
"""

import os
import signal
import threading
import time
from pathlib import Path

import pytest

from namhatta.launcher import DEV_TARGET, SEED_TARGET, LaunchTarget, ProcessLauncher, run_target


def wait_for(path: Path, timeout: float = 10.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if path.exists():
            return True
        time.sleep(0.01)
    return False


@pytest.mark.integration
class TestRealChildExit:
    """Exit status of real children is mirrored."""

    def test_exit_code_mirrored(self, lg, tmp_path, write_script):
        write_script("server/main.py", "import sys\nsys.exit(3)\n")
        result = ProcessLauncher(lg, DEV_TARGET, base_dir=tmp_path).run()
        assert result.exit_code == 3

    def test_success(self, lg, log_stream, tmp_path, write_script):
        write_script("scripts/seed.py", "print('seeded')\n")
        result = ProcessLauncher(lg, SEED_TARGET, base_dir=tmp_path).run()

        assert result.exit_code == 0
        assert "seed script completed successfully" in log_stream.getvalue()

    def test_killed_by_signal(self, lg, tmp_path, write_script):
        write_script(
            "server/main.py",
            "import os, signal\nos.kill(os.getpid(), signal.SIGKILL)\n",
        )
        result = ProcessLauncher(lg, DEV_TARGET, base_dir=tmp_path).run()
        assert result.exit_code == 128 + signal.SIGKILL

    def test_missing_script_exits_one(self, lg, tmp_path):
        result = ProcessLauncher(lg, DEV_TARGET, base_dir=tmp_path).run()

        assert result.exit_code == 1
        assert result.spawn_failed

    def test_missing_interpreter_exits_one(self, lg, log_stream, tmp_path, write_script):
        write_script("server/main.py", "")
        target = LaunchTarget(
            name="dev",
            script="server/main.py",
            interpreter=(str(tmp_path / "no-such-interpreter"),),
            failure_message="failed to start server",
        )
        result = ProcessLauncher(lg, target, base_dir=tmp_path).run()

        assert result.exit_code == 1
        assert "failed to start server" in log_stream.getvalue()


@pytest.mark.integration
class TestRealChildEnvironment:
    """The child sees the mode variable; the parent's environment is untouched."""

    def test_child_sees_mode_variable(self, lg, tmp_path, write_script, clean_env):
        out = tmp_path / "env.txt"
        write_script(
            "server/main.py",
            "import os, sys\n"
            f"open({str(out)!r}, 'w').write(os.environ.get('NODE_ENV', ''))\n",
        )
        environ_before = dict(os.environ)

        result = ProcessLauncher(lg, DEV_TARGET, base_dir=tmp_path).run()

        assert result.exit_code == 0
        assert out.read_text() == "development"
        assert dict(os.environ) == environ_before
        assert "NODE_ENV" not in os.environ

    def test_child_inherits_parent_variables(self, lg, tmp_path, write_script, monkeypatch):
        monkeypatch.setenv("NAMHATTA_TEST_MARKER", "inherited")
        out = tmp_path / "marker.txt"
        write_script(
            "server/main.py",
            "import os\n"
            f"open({str(out)!r}, 'w').write(os.environ['NAMHATTA_TEST_MARKER'])\n",
        )

        ProcessLauncher(lg, DEV_TARGET, base_dir=tmp_path).run()

        assert out.read_text() == "inherited"


@pytest.mark.integration
class TestRealSignalForwarding:
    """A signal delivered to the parent reaches the child exactly once."""

    def test_sigterm_forwarded_once(self, lg, tmp_path, write_script):
        ready = tmp_path / "ready"
        received = tmp_path / "received"
        write_script(
            "server/main.py",
            "import signal, sys, time\n"
            "def on_term(signum, frame):\n"
            f"    with open({str(received)!r}, 'a') as f:\n"
            "        f.write('TERM\\n')\n"
            "    sys.exit(7)\n"
            "signal.signal(signal.SIGTERM, on_term)\n"
            f"open({str(ready)!r}, 'w').close()\n"
            "time.sleep(30)\n"
            "sys.exit(99)\n",
        )

        main_ident = threading.main_thread().ident

        def deliver():
            if wait_for(ready):
                signal.pthread_kill(main_ident, signal.SIGTERM)

        sender = threading.Thread(target=deliver, daemon=True)
        sender.start()
        result = ProcessLauncher(lg, DEV_TARGET, base_dir=tmp_path).run()
        sender.join(timeout=10)

        assert result.exit_code == 7
        assert result.forwarded_signal is signal.SIGTERM
        assert received.read_text() == "TERM\n"


@pytest.mark.integration
class TestRunTarget:
    """run_target() returns the exit code to use for the parent."""

    def test_returns_exit_code(self, tmp_path, write_script):
        write_script("scripts/seed.py", "raise SystemExit(4)\n")
        assert run_target(SEED_TARGET, base_dir=tmp_path) == 4

    def test_derives_launcher_logger(self, lg, log_stream, tmp_path, write_script):
        write_script("scripts/seed.py", "")
        run_target(SEED_TARGET, base_dir=tmp_path, lg=lg)
        assert "[/launcher/seed]" in log_stream.getvalue()
