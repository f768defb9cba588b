import json
import logging

from mindeps.config.schemas.observability import LoggingConfig
from mindeps.log import JsonFormatter, configure_logging


def test_configure_logging_level_and_format():
    logger = configure_logging(LoggingConfig(level="warn", format="json"))
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_json_formatter_fields():
    record = logging.LogRecord(
        "mindeps.graph", logging.INFO, __file__, 1, "built %d", (3,), None
    )
    data = json.loads(JsonFormatter().format(record))
    assert data["level"] == "info"
    assert data["logger"] == "mindeps.graph"
    assert data["message"] == "built 3"
