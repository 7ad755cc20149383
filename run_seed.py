#!/usr/bin/env python3
"""
Run the database seed script in development mode.

Runs scripts/seed.py (relative to this file) with NODE_ENV=development and
exits with its exit code. Equivalent to ``namhatta seed`` without
configuration lookup.
"""

from pathlib import Path

from namhatta.launcher import SEED_TARGET, run_target

if __name__ == "__main__":
    raise SystemExit(run_target(SEED_TARGET, base_dir=Path(__file__).parent))
