"""Entry point of the `bagkit` console script: `bagkit <command> [key=value ...]`."""

import logging
import sys
from typing import Callable, Dict, List, Optional

from bagkit.cli import demo

COMMANDS: Dict[str, Callable] = {
    "demo": demo.main,
}


def main(argv: Optional[List[str]] = None) -> None:
    if argv is None:
        argv = sys.argv[1:]

    command_names = ", ".join(COMMANDS)
    if not argv:
        raise ValueError(f"No command given; available commands: {command_names}")

    command, command_args = argv[0], argv[1:]
    if command not in COMMANDS:
        raise ValueError(f"Unknown command {command!r}; available commands: {command_names}")

    logging.basicConfig(level=logging.INFO)
    COMMANDS[command](argv=command_args)


if __name__ == "__main__":
    main()
