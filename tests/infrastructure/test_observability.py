"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging
from uuid import uuid4

from sh_pizza.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "sh_pizza.test", logging.INFO, __file__, 1, "Branch created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_extras():
    entity = uuid4()
    line = json.loads(JSONFormatter().format(_record(entity_id=entity, role="ADMIN")))
    assert line["message"] == "Branch created"
    assert line["level"] == "INFO"
    assert line["entity_id"] == str(entity)
    assert line["role"] == "ADMIN"
    assert "user_id" not in line


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "sh_pizza"]
    assert len(ours) == 1
    assert logging.root.level == logging.INFO
