"""Basic tests for logger system"""

import io
import json
import threading
from datetime import timezone

import pytest

from cappie import (
    FieldBuilder,
    InvalidLevelError,
    LogLevel,
    LogRecord,
    Logger,
    LoggerBuilder,
    LoggerConfig,
    create_logger,
)
from cappie.core.fields import format_value, merge_fields, to_field_value
from cappie.formatters import (
    CompactFormatter,
    ComponentPosition,
    FlexibleFormatter,
    JSONFormatter,
    PrettyFormatter,
)
from cappie.writers import BaseWriter, ConsoleWriter, FileWriter, MultiWriter


class MockWriter(BaseWriter):
    """Mock writer for testing."""

    def __init__(self):
        self.lines = []

    def write(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()


def json_logger(name="test", level=LogLevel.TRACE, base_fields=None):
    writer = MockWriter()
    logger = Logger(LoggerConfig(
        name=name,
        min_level=level,
        formatter=JSONFormatter(),
        writer=writer,
        base_fields=base_fields or {},
    ))
    return logger, writer


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.TRACE < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.FATAL

    def test_numeric_values(self):
        assert [int(level) for level in LogLevel] == [10, 20, 30, 40, 50, 60]

    def test_canonical_strings(self):
        assert [str(level) for level in LogLevel] == [
            "TRACE", "DEBUG", "INFO", "WARN", "ERROR", "FATAL"
        ]

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string("Fatal") == LogLevel.FATAL

    def test_from_string_invalid(self):
        with pytest.raises(InvalidLevelError):
            LogLevel.from_string("verbose")
        with pytest.raises(ValueError):
            LogLevel.from_string("")

    def test_parse_returns_none(self):
        assert LogLevel.parse("warn") == LogLevel.WARN
        assert LogLevel.parse("warning") is None
        assert LogLevel.parse(None) is None

    def test_surrounding_whitespace_rejected(self):
        assert LogLevel.parse(" info ") is None
        with pytest.raises(InvalidLevelError):
            LogLevel.from_string("info\n")

    def test_round_trip_is_bijective(self):
        for level in LogLevel:
            assert LogLevel.from_string(str(level)) is level

    def test_color_code(self):
        assert LogLevel.INFO.color_code == "\033[32m"
        assert LogLevel.INFO.reset_code == "\033[0m"


class TestFields:
    """Test field helpers."""

    def test_builder_chaining(self):
        fields = (FieldBuilder()
            .string("user", "alice")
            .number("count", 42)
            .bool("first_time", True)
            .field("tags", ("a", "b"))
            .build())
        assert fields == {"user": "alice", "count": 42, "first_time": True, "tags": ["a", "b"]}

    def test_number_rejects_non_numbers(self):
        with pytest.raises(TypeError):
            FieldBuilder().number("n", "42")
        with pytest.raises(TypeError):
            FieldBuilder().number("n", True)

    def test_build_returns_copy(self):
        builder = FieldBuilder().string("a", "1")
        fields = builder.build()
        fields["b"] = 2
        assert builder.build() == {"a": "1"}

    def test_merge_call_wins(self):
        base = {"env": "prod", "version": "1.0"}
        call = {"version": "2.0", "user": 7}
        merged = merge_fields(base, call)
        assert merged == {"env": "prod", "version": "2.0", "user": 7}
        assert base == {"env": "prod", "version": "1.0"}
        assert call == {"version": "2.0", "user": 7}

    def test_to_field_value_normalizes(self):
        assert to_field_value({1: (2, 3)}) == {"1": [2, 3]}

    def test_format_value(self):
        assert format_value("text") == "text"
        assert format_value(3) == "3"
        assert format_value(2.5) == "2.5"
        assert format_value(True) == "true"
        assert format_value(None) == "null"
        assert format_value({"a": [1, "x"]}) == '{"a":[1,"x"]}'
        assert format_value([object()]) == ""


class TestLogRecord:
    """Test log record structure."""

    def test_create_record(self):
        record = LogRecord(level=LogLevel.INFO, message="Test message")
        assert record.level == LogLevel.INFO
        assert record.message == "Test message"
        assert record.logger_name == ""
        assert record.fields == {}
        assert record.timestamp.tzinfo == timezone.utc

    def test_invalid_level(self):
        with pytest.raises(TypeError):
            LogRecord(level=30, message="x")

    def test_message_coerced(self):
        assert LogRecord(level=LogLevel.INFO, message=42).message == "42"

    def test_to_dict(self):
        data = LogRecord(level=LogLevel.DEBUG, message="Test", fields={"a": 1}).to_dict()
        assert data["level"] == "DEBUG"
        assert data["message"] == "Test"
        assert data["fields"] == {"a": 1}


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.name == "app"
        assert config.min_level == LogLevel.INFO
        assert isinstance(config.formatter, JSONFormatter)
        assert isinstance(config.writer, ConsoleWriter)

    def test_debug_config(self):
        config = LoggerConfig.debug_config()
        assert config.min_level == LogLevel.DEBUG
        assert isinstance(config.formatter, PrettyFormatter)

    def test_production_config(self):
        config = LoggerConfig.production_config()
        assert config.min_level == LogLevel.WARN

    def test_invalid_level(self):
        with pytest.raises(TypeError):
            LoggerConfig(min_level="INFO")

    def test_base_fields_copied(self):
        fields = {"a": 1}
        config = LoggerConfig(base_fields=fields)
        fields["b"] = 2
        assert config.base_fields == {"a": 1}


class TestLogger:
    """Test main logger functionality."""

    def test_create_logger(self):
        logger = create_logger("svc")
        assert logger.name == "svc"
        assert logger.min_level == LogLevel.INFO
        assert isinstance(logger.formatter, JSONFormatter)

    def test_level_filtering(self):
        for threshold in LogLevel:
            logger, writer = json_logger(level=threshold)
            for level in LogLevel:
                writer.clear()
                logger.log(level, "msg")
                assert (len(writer.lines) == 1) == (level >= threshold)

    def test_level_methods(self):
        logger, writer = json_logger()
        logger.trace("t")
        logger.debug("d")
        logger.info("i")
        logger.warn("w")
        logger.error("e")
        logger.fatal("f")
        levels = [json.loads(line)["level"] for line in writer.lines]
        assert levels == [10, 20, 30, 40, 50, 60]

    def test_with_methods(self):
        logger, writer = json_logger()
        logger.trace_with("t", lambda log: log.number("n", 1))
        logger.debug_with("d", lambda log: log.number("n", 2))
        logger.info_with("i", lambda log: log.number("n", 3))
        logger.warn_with("w", lambda log: log.number("n", 4))
        logger.error_with("e", lambda log: log.number("n", 5))
        logger.fatal_with("f", lambda log: log.number("n", 6))
        assert [json.loads(line)["n"] for line in writer.lines] == [1, 2, 3, 4, 5, 6]

    def test_filtered_builder_not_invoked(self):
        logger, writer = json_logger(level=LogLevel.ERROR)
        calls = []
        logger.info_with("skipped", lambda log: calls.append(log))
        assert calls == []
        assert writer.lines == []

    def test_json_record(self):
        logger, writer = json_logger(name="backend.api")
        logger.info("user created", user_id=42, plan="pro")
        data = json.loads(writer.lines[0])
        assert data["name"] == "backend.api"
        assert data["msg"] == "user created"
        assert data["user_id"] == 42
        assert data["plan"] == "pro"
        assert data["time"].endswith("+00:00")

    def test_base_fields_merged(self):
        logger, writer = json_logger(base_fields={"version": "1.0", "env": "prod"})
        logger.info("one", version="2.0")
        logger.info("two")
        first, second = [json.loads(line) for line in writer.lines]
        assert first["version"] == "2.0"
        assert first["env"] == "prod"
        assert second["version"] == "1.0"
        assert logger.base_fields == {"version": "1.0", "env": "prod"}

    def test_base_fields_property_is_copy(self):
        logger, _ = json_logger(base_fields={"a": 1})
        logger.base_fields["b"] = 2
        assert logger.base_fields == {"a": 1}

    def test_message_as_field_name(self):
        logger, writer = json_logger()
        logger.info("x", message="y")
        logger.fatal("z", message="w", level_name="fatal")
        first, second = [json.loads(line) for line in writer.lines]
        assert first["msg"] == "x"
        assert first["message"] == "y"
        assert second["message"] == "w"

    def test_formatter_edits_after_build_do_not_leak(self):
        writer = MockWriter()
        formatter = FlexibleFormatter()
        logger = (LoggerBuilder()
            .with_name("svc")
            .with_formatter(formatter)
            .with_writer(writer)
            .build())

        formatter.clear_components().add_message(ComponentPosition.START)
        logger.formatter.clear_components()
        logger.info("b")

        assert writer.lines[0].endswith("(svc) INFO: b")

    def test_child_formatter_independent_of_parent(self):
        writer = MockWriter()
        parent = Logger(LoggerConfig(name="app", formatter=PrettyFormatter(), writer=writer))
        child = parent.child("db")
        child.formatter.with_no_colors()
        child.info("hello")
        assert "\033[32mINFO\033[0m" in writer.lines[0]

    def test_failing_writer_does_not_raise(self, capsys):
        class BrokenWriter(BaseWriter):
            def write(self, line):
                raise RuntimeError("disk gone")

        logger = Logger(LoggerConfig(writer=BrokenWriter()))
        logger.error("still returns")
        assert "disk gone" in capsys.readouterr().err

    def test_closed_console_in_fan_out(self):
        closed = io.StringIO()
        closed.close()
        mock = MockWriter()
        logger = Logger(LoggerConfig(
            formatter=CompactFormatter(include_timestamp=False),
            writer=MultiWriter([ConsoleWriter(stream=closed), mock]),
        ))
        logger.info("hi")
        assert mock.lines == ["INF: hi"]

    def test_is_enabled(self):
        logger, _ = json_logger(level=LogLevel.WARN)
        assert not logger.is_enabled(LogLevel.INFO)
        assert logger.is_enabled(LogLevel.WARN)
        assert logger.is_enabled(LogLevel.FATAL)

    def test_pretty_logger(self, capsys):
        logger = Logger.pretty("web")
        logger.info("hi")
        out = capsys.readouterr().out
        assert "(web)" in out
        assert "hi" in out

    def test_concurrent_logging(self):
        logger, writer = json_logger(base_fields={"shared": True})

        def worker(n):
            for i in range(50):
                logger.info("tick", worker=n, i=i)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(writer.lines) == 200
        assert all(json.loads(line)["shared"] is True for line in writer.lines)
        assert logger.base_fields == {"shared": True}


class TestChildLogger:
    """Test child logger derivation."""

    def test_child_name(self):
        logger, _ = json_logger(name="frontend")
        assert logger.child("http").name == "frontend.http"
        assert logger.child("http").child("auth").name == "frontend.http.auth"

    def test_child_of_unnamed_logger(self):
        logger, _ = json_logger(name="")
        assert logger.child("x").name == "x"

    def test_child_inherits_base_fields(self):
        logger, _ = json_logger(base_fields={"service": "auth", "version": "1.2.3"})
        child = logger.child("x")
        assert child.base_fields == logger.base_fields

    def test_child_inherits_configuration(self):
        logger, writer = json_logger(name="app", level=LogLevel.WARN)
        child = logger.child("db")
        assert child.min_level == LogLevel.WARN
        assert isinstance(child.formatter, JSONFormatter)
        assert child.writer is logger.writer
        child.info("dropped")
        child.error("kept")
        assert len(writer.lines) == 1
        assert json.loads(writer.lines[0])["name"] == "app.db"


class TestLoggerBuilder:
    """Test the builder."""

    def test_builder_pattern(self):
        logger = (LoggerBuilder()
            .with_name("builder_test")
            .with_level(LogLevel.DEBUG)
            .with_formatter(CompactFormatter())
            .build())
        assert logger.name == "builder_test"
        assert logger.min_level == LogLevel.DEBUG
        assert isinstance(logger.formatter, CompactFormatter)
        assert isinstance(logger.writer, ConsoleWriter)

    def test_level_from_string(self):
        assert LoggerBuilder().with_level("error").build().min_level == LogLevel.ERROR
        with pytest.raises(InvalidLevelError):
            LoggerBuilder().with_level("loud")

    def test_base_fields(self):
        writer = MockWriter()
        logger = (LoggerBuilder()
            .with_writer(writer)
            .with_field("version", "1.2.3")
            .with_fields({"environment": "production"})
            .build())
        logger.info("started")
        data = json.loads(writer.lines[0])
        assert data["version"] == "1.2.3"
        assert data["environment"] == "production"

    def test_multiple_writers(self, tmp_path):
        path = tmp_path / "app.log"
        mock = MockWriter()
        logger = (LoggerBuilder()
            .with_pretty(colored=False)
            .add_writer(mock)
            .with_file(path)
            .build())
        assert isinstance(logger.writer, MultiWriter)
        logger.error("to both")
        assert len(mock.lines) == 1
        assert path.read_text(encoding="utf-8") == mock.lines[0] + "\n"
        assert "\033" not in mock.lines[0]

    def test_single_file_writer(self, tmp_path):
        logger = LoggerBuilder().with_file(tmp_path / "only.log").build()
        assert isinstance(logger.writer, FileWriter)

    def test_with_flexible(self):
        writer = MockWriter()
        logger = LoggerBuilder().with_name("svc").with_flexible().with_writer(writer).build()
        assert isinstance(logger.formatter, FlexibleFormatter)
        logger.info("hello", n=1)
        assert writer.lines[0].endswith("(svc) INFO: hello n=1")
