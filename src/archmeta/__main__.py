"""Entry point for ``python -m archmeta``."""

from archmeta.presentation.cli import main

raise SystemExit(main())
