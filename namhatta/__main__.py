"""Allow ``python -m namhatta``."""

from namhatta.cli.cli import main

raise SystemExit(main())
