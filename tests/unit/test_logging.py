"""Tests for the logging configuration module."""

from pathlib import Path

from trace_symbolicator.utils.logging import (
    SERVICE_NAME,
    LogFormat,
    LogLevel,
    add_context_processor,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


class TestAddContextProcessor:
    """Tests for the context processor."""

    def test_adds_service_name(self) -> None:
        """Test that the service name is added to every entry."""
        result = add_context_processor(None, "info", {"event": "test"})  # type: ignore[arg-type]

        assert result["service"] == SERVICE_NAME
        assert result["event"] == "test"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configure_with_enums(self) -> None:
        """Test configuration with enum values."""
        configure_logging(level=LogLevel.DEBUG, log_format=LogFormat.CONSOLE)
        get_logger("test").debug("configured")

    def test_configure_with_strings(self) -> None:
        """Test configuration with string values."""
        configure_logging(level="warning", log_format="JSON")
        get_logger("test").warning("configured")

    def test_configure_file_logging(self, tmp_path: Path) -> None:
        """Test that file logging creates the log file's directory."""
        log_file = tmp_path / "logs" / "symbolicator.log"

        configure_logging(level="INFO", log_format="json", file_path=log_file, file_enabled=True)

        assert log_file.parent.exists()

    def test_file_path_ignored_when_disabled(self, tmp_path: Path) -> None:
        """Test that a file path alone does not enable file logging."""
        log_file = tmp_path / "logs" / "symbolicator.log"

        configure_logging(file_path=log_file, file_enabled=False)

        assert not log_file.parent.exists()


class TestContextBinding:
    """Tests for context binding helpers."""

    def test_bind_unbind_clear(self) -> None:
        """Test that context helpers run without error."""
        bind_context(trace_source="crash.txt", frame_count=4)
        unbind_context("frame_count")
        clear_context()
