"""Allow running the game with ``python -m dungeon_escape``."""

from dungeon_escape.cli.repl import main

raise SystemExit(main())
