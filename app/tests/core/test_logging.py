import structlog

from core import logging as app_logging


def test_is_test_environment_detects_pytest():
    assert app_logging._is_test_environment() is True


def test_configure_logging_returns_bound_logger():
    logger = app_logging.configure_logging()
    assert hasattr(logger, "bind")


def test_get_module_logger_binds_calling_module():
    logger = app_logging.get_module_logger()
    context = structlog.get_context(logger)
    assert context["component"] == "test_logging"
    assert context["module_path"].endswith("test_logging")


def test_request_context_is_replaced_and_cleared():
    app_logging.bind_request_context(request_id="first", path="/a")
    app_logging.bind_request_context(request_id="second")

    assert structlog.contextvars.get_contextvars() == {"request_id": "second"}

    app_logging.clear_request_context()
    assert structlog.contextvars.get_contextvars() == {}
