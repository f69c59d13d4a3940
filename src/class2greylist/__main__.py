"""Allow running as: python -m class2greylist."""

from class2greylist.presentation.cli import main

raise SystemExit(main())
