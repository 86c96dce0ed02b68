import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Handlers are attached once by configure_logging() at the CLI entry point.
    """
    return logging.getLogger(f"passlink.{name}")
