"""
refgraph CLI

Entry point: configuration loading, argument parsing and dispatch only.
All command logic lives in cli.handlers.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv

from cli.wiring import build_parser, dispatch_command
from refgraph import __version__
from refgraph.config import defaults_from_config, load_pyproject_config
from refgraph.errors import ConfigError


def main(argv=None) -> int:
    load_dotenv()
    try:
        defaults = defaults_from_config(load_pyproject_config(Path.cwd()))
    except ConfigError as e:
        print(f"refgraph: {e}", file=sys.stderr)
        return 2
    parser = build_parser(version=__version__, defaults=defaults)
    args = parser.parse_args(argv)
    return dispatch_command(parser, args)


if __name__ == "__main__":
    sys.exit(main())
