#!/usr/bin/env python3
"""
Start the Namhatta Management System in development mode.

Runs server/main.py (relative to this file) with NODE_ENV=development,
forwards Ctrl+C/SIGTERM to it and exits with the server's exit code.
Equivalent to ``namhatta dev`` without configuration lookup.
"""

from pathlib import Path

from namhatta.launcher import DEV_TARGET, run_target

if __name__ == "__main__":
    raise SystemExit(run_target(DEV_TARGET, base_dir=Path(__file__).parent))
