"""Tests for error handling utilities."""

import logging

import pytest

from solid_examples.utils.error_handling import (
    SolidExamplesError,
    handle_example_error,
    handle_generic_error,
    log_and_exit,
    with_error_handling,
)


class TestHandleErrors:
    """Tests for the error logging helpers."""

    def test_handle_generic_error(self, caplog):
        """Test the message is logged at ERROR level."""
        with caplog.at_level(logging.DEBUG):
            try:
                raise RuntimeError("boom")
            except RuntimeError as e:
                handle_generic_error(e, "test operation")

        assert "Unexpected error during test operation: boom" in caplog.text
        assert "Traceback" in caplog.text

    def test_handle_generic_error_without_traceback(self, caplog):
        """Test the traceback can be suppressed."""
        with caplog.at_level(logging.DEBUG):
            handle_generic_error(ValueError("bad"), "parsing", log_traceback=False)

        assert "parsing: bad" in caplog.text
        assert "Traceback" not in caplog.text

    def test_handle_example_error(self, caplog):
        """Test package errors log a short message."""
        handle_example_error(SolidExamplesError("nope"), "Example selection")
        assert "Example selection failed: nope" in caplog.text


class TestWithErrorHandling:
    """Tests for with_error_handling decorator."""

    def test_success(self):
        """Test the wrapped function's result passes through."""

        @with_error_handling("adding")
        def add(a, b):
            return a + b

        assert add(1, 2) == 3

    def test_reraise(self, caplog):
        """Test errors are logged and re-raised by default."""

        @with_error_handling("failing")
        def fail():
            raise RuntimeError("broken")

        with pytest.raises(RuntimeError):
            fail()
        assert "Unexpected error during failing: broken" in caplog.text

    def test_package_error_logged_briefly(self, caplog):
        """Test package errors use the short message."""

        @with_error_handling("lookup")
        def fail():
            raise SolidExamplesError("missing")

        with pytest.raises(SolidExamplesError):
            fail()
        assert "lookup failed: missing" in caplog.text

    def test_swallow(self):
        """Test reraise=False returns None."""

        @with_error_handling("quiet", reraise=False)
        def fail():
            raise RuntimeError("broken")

        assert fail() is None

    def test_exit_on_error(self):
        """Test exit_on_error exits with the given code."""

        @with_error_handling("fatal", exit_on_error=True, exit_code=3)
        def fail():
            raise RuntimeError("broken")

        with pytest.raises(SystemExit) as exc_info:
            fail()
        assert exc_info.value.code == 3


def test_log_and_exit(caplog):
    """Test log_and_exit logs then exits."""
    with pytest.raises(SystemExit) as exc_info:
        log_and_exit("giving up")

    assert exc_info.value.code == 1
    assert "giving up" in caplog.text
