#!/usr/bin/env python3
"""Basic usage example"""

from cappie import LoggerBuilder, LogLevel, PrettyFormatter, create_logger


def main():
    # JSON lines to stdout
    logger = create_logger("my-app")
    logger.info("Application started")
    logger.info_with("User logged in", lambda log: (
        log.string("user_id", "12345")
           .string("ip", "192.168.1.1")
           .bool("first_time", True)))

    # Pretty logging with base fields, to console and file
    pretty = (LoggerBuilder()
        .with_name("api-server")
        .with_level(LogLevel.TRACE)
        .with_formatter(PrettyFormatter()
            .with_color(LogLevel.ERROR, "\033[91m")
            .with_time_format("%Y-%m-%d %H:%M:%S"))
        .with_field("version", "1.2.3")
        .with_console()
        .with_file("logs/example.log")
        .build())

    pretty.trace("This is trace")
    pretty.debug("This is debug")
    pretty.info("Server started", port=8080)
    pretty.warn("This is warning")
    pretty.error("Database connection failed", host="localhost", port=5432)
    pretty.fatal("This is fatal")

    # Child logger keeps formatter, writer and base fields
    auth = pretty.child("auth")
    auth.info("Authentication module initialized")


if __name__ == "__main__":
    main()
