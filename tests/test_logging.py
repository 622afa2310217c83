import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from refgraph.orchestration.logging import configure_cli_logging, get_logger


def test_verbose_and_quiet_set_child_levels():
    configure_cli_logging(verbose=True)
    for child in ("scanner", "pipeline", "cli"):
        assert logging.getLogger(f"refgraph.{child}").level == logging.DEBUG
    configure_cli_logging(quiet=True)
    assert get_logger("scanner").level == logging.WARNING


def test_only_used_loggers_are_created():
    configure_cli_logging()
    assert "refgraph.config" not in logging.Logger.manager.loggerDict
