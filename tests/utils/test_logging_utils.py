"""Tests for logging_utils module."""

import logging

from solid_examples.utils.logging_utils import (
    format_count_with_unit,
    format_principle_counts,
    log_list_items,
    log_operation_complete,
    log_operation_start,
    log_summary_separator,
)


class TestOperationLogging:
    """Tests for start and complete messages."""

    def test_start_with_details(self, caplog):
        with caplog.at_level(logging.INFO):
            log_operation_start("run", examples="2 examples")
        assert "Starting run (examples=2 examples)" in caplog.text

    def test_start_without_details(self, caplog):
        with caplog.at_level(logging.INFO):
            log_operation_start("list")
        assert "Starting list" in caplog.text

    def test_complete(self, caplog):
        with caplog.at_level(logging.INFO):
            log_operation_complete("run", examples=2)
            log_operation_complete("list")
        assert "Completed run (examples=2)" in caplog.text
        assert "Completed list" in caplog.text


class TestFormatting:
    """Tests for count formatting helpers."""

    def test_format_count_with_unit(self):
        assert format_count_with_unit(1, "example") == "1 example"
        assert format_count_with_unit(3, "example") == "3 examples"
        assert format_count_with_unit(1, "principles", singular="principle") == "1 principle"
        assert format_count_with_unit(0, "principles") == "0 principles"

    def test_format_principle_counts(self):
        assert format_principle_counts({"SRP": 2, "OCP": 1, "LSP": 0}) == "SRP: 2, OCP: 1"
        assert format_principle_counts({}) == "No examples"


class TestSeparatorsAndLists:
    """Tests for separator and list logging."""

    def test_separator_with_title(self, caplog):
        with caplog.at_level(logging.INFO):
            log_summary_separator("Summary", width=10)
        assert caplog.messages == ["=" * 10, "Summary", "=" * 10]

    def test_separator_without_title(self, caplog):
        with caplog.at_level(logging.INFO):
            log_summary_separator(width=5)
        assert caplog.messages == ["=" * 5]

    def test_list_items(self, caplog):
        with caplog.at_level(logging.DEBUG):
            log_list_items(["a", "b"], prefix="* ", level=logging.DEBUG)
        assert caplog.messages == ["* a", "* b"]
