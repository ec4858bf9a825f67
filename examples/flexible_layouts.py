#!/usr/bin/env python3
"""Flexible formatter layouts"""

from cappie import ComponentPosition, FlexibleFormatter, Logger, LoggerConfig

P = ComponentPosition


def show(title, formatter, name="app"):
    print(f"--- {title} ---")
    logger = Logger(LoggerConfig(name=name, formatter=formatter))
    logger.info("Application initialized")
    logger.warn_with("High memory usage detected", lambda log: (
        log.number("usage_mb", 1024).string("process", "web-server")))
    print()


def main():
    show("Default", FlexibleFormatter())

    show("Message first", FlexibleFormatter()
        .clear_components()
        .add_message(P.START)
        .add_level(P.AFTER_MESSAGE, color="\033[31m", prefix=" ")
        .add_timestamp(P.AFTER_LEVEL, prefix=" [", suffix="]")
        .add_fields(P.END, prefix=" "))

    show("Time at the end", FlexibleFormatter()
        .clear_components()
        .add_logger_name(P.START, color="\033[36m", prefix="[", suffix="]")
        .add_level(P.AFTER_LOGGER_NAME, color="\033[32m", prefix=" ")
        .add_custom_text(": ", P.AFTER_LEVEL)
        .add_message(P.AFTER_LEVEL)
        .add_fields(P.AFTER_MESSAGE, prefix=" | ")
        .add_timestamp(P.END, color="\033[90m", prefix=" (at ", suffix=")"), name="backend")

    show("No colors", FlexibleFormatter()
        .with_no_colors()
        .clear_components()
        .add_timestamp(P.START, prefix="TIME:")
        .add_logger_name(P.AFTER_TIMESTAMP, prefix=" APP:")
        .add_level(P.AFTER_LOGGER_NAME, prefix=" LEVEL:")
        .add_message(P.AFTER_LEVEL, prefix=" MSG:")
        .add_fields(P.END, prefix=" DATA:"), name="plain")

    show("JSON-like", FlexibleFormatter()
        .clear_components()
        .add_custom_text('{ "timestamp": "', P.START)
        .add_timestamp(P.START)
        .add_custom_text('", "level": "', P.AFTER_TIMESTAMP)
        .add_level(P.AFTER_TIMESTAMP, color="\033[33m")
        .add_custom_text('", "logger": "', P.AFTER_LEVEL)
        .add_logger_name(P.AFTER_LEVEL)
        .add_custom_text('", "message": "', P.AFTER_LOGGER_NAME)
        .add_message(P.AFTER_LOGGER_NAME)
        .add_custom_text('"', P.AFTER_MESSAGE)
        .add_fields(P.END, prefix=', "fields": { ', suffix=" }")
        .add_custom_text(" }", P.END), name="json-like")


if __name__ == "__main__":
    main()
