import logging

import pytest
import requests
from unittest.mock import MagicMock, patch

from percy_playwright import Percy
from percy_playwright.client.transport import Transport
from percy_playwright.utils.config import PercyConfig
from percy_playwright.utils.log import LOGGER_NAME, configure_logging, label

NOT_RUNNING = "Percy is not running, disabling snapshots"


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


@pytest.fixture
def percy_logger():
    """Restores the percy_playwright logger after a test reconfigures it."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def unreachable_transport():
    transport = MagicMock(spec=Transport)
    transport.get.side_effect = requests.ConnectionError("refused")
    return transport


def test_label_switches_with_debug():
    assert label() == "[\u001b[35mpercy\u001b[39m]"
    assert label(debug=True) == "[\u001b[35mpercy:python\u001b[39m]"


def test_labelled_handler_when_application_has_no_logging(percy_logger):
    root = logging.getLogger()
    with patch.object(root, "handlers", []):
        configure_logging(debug=True)
        configure_logging(debug=False)

    percy_handlers = [h for h in percy_logger.handlers if getattr(h, "_percy_handler", False)]
    assert len(percy_handlers) == 1
    assert percy_logger.level == logging.INFO
    assert not percy_logger.propagate
    assert "percy" in percy_handlers[0].formatter._fmt


def test_application_logging_is_left_alone(percy_logger):
    app_handler = RecordingHandler()
    percy_logger.setLevel(logging.WARNING)
    root = logging.getLogger()

    with patch.object(root, "handlers", [app_handler]):
        configure_logging(debug=True)

    assert not any(getattr(h, "_percy_handler", False) for h in percy_logger.handlers)
    assert percy_logger.level == logging.WARNING
    assert percy_logger.propagate


def test_disabled_notice_logged_once_with_configured_root(percy_logger):
    app_handler = RecordingHandler()
    root = logging.getLogger()
    percy_logger.setLevel(logging.INFO)

    with patch.object(root, "handlers", [app_handler]):
        percy = Percy(MagicMock(), config=PercyConfig(), transport=unreachable_transport())

    assert not percy.enabled
    assert app_handler.messages.count(NOT_RUNNING) == 1


def test_disabled_notice_printed_once_without_root_logging(percy_logger, capsys):
    root = logging.getLogger()
    with patch.object(root, "handlers", []):
        Percy(MagicMock(), config=PercyConfig(), transport=unreachable_transport())

    err = capsys.readouterr().err
    assert err.count(NOT_RUNNING) == 1
    assert f"{label()} {NOT_RUNNING}" in err
