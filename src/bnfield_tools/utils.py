"""
Utilities for the bnfield tools
"""

import logging

LOGGER_NAME = "bnfield"


def parse_hex_or_int(value: str) -> int:
    """Read a signed integer from a hex string or a decimal string"""
    sign = 1
    if value.startswith("-"):
        sign, value = -1, value[1:]
    # if the value is a hex string, convert it
    if value.startswith("0x"):
        return sign * int(value[2:], 16)
    # otherwise it has to be decimal
    else:
        return sign * int(value)


class _PrefixFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        output = super().format(record)
        return "\n".join("# " + x for x in output.splitlines())


def get_logger(level: str = "WARNING") -> logging.Logger:
    """
    Return the tool logger, attaching a stderr handler on first use.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level=level.upper())
    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        formatter = _PrefixFormatter("%(levelname)s:%(name)s:%(message)s")
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    return logger
