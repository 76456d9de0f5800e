"""Allow ``python -m cloudnav``."""

from cloudnav.cli import main

raise SystemExit(main())
