"""
Unit tests for structured logging.
"""
import json
import logging

from pkg.logger.logger import (
    StructuredFormatter,
    get_logger,
    get_request_id,
    set_request_id,
)


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


class TestStructuredLogging:
    """Tests for StructuredFormatter and StructuredLogger."""

    def test_keyword_fields_become_json_fields(self):
        logger = get_logger("tests.logger.fields")
        handler = _ListHandler()
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

        try:
            set_request_id("req-1")
            logger.info("Product created", product_id="42")
        finally:
            logger.removeHandler(handler)
            set_request_id(None)

        output = json.loads(StructuredFormatter(service="product-registry").format(handler.records[0]))

        assert output["message"] == "Product created"
        assert output["product_id"] == "42"
        assert output["level"] == "INFO"
        assert output["service"] == "product-registry"
        assert output["request_id"] == "req-1"

    def test_exception_info_is_formatted(self):
        logger = get_logger("tests.logger.errors")
        handler = _ListHandler()
        logger.addHandler(handler)

        try:
            try:
                raise ValueError("boom")
            except ValueError as exc:
                logger.error("Failed", exc_info=exc)
        finally:
            logger.removeHandler(handler)

        output = json.loads(StructuredFormatter().format(handler.records[0]))

        assert "ValueError: boom" in output["exception"]
        assert "service" not in output

    def test_request_id_context(self):
        set_request_id("abc")
        assert get_request_id() == "abc"
        set_request_id(None)
        assert get_request_id() is None
