"""
CLI context and configuration.

Manages exit codes and the environment-backed defaults of CLI options.
"""

from __future__ import annotations

import os
from enum import IntEnum

from abo_parser.core.parser.models import ParserConfig

ENV_ENCODING = "ABO_PARSER_ENCODING"
ENV_MAX_BYTES = "ABO_PARSER_MAX_BYTES"

# Default input size limit for CLI usage (can be overridden via flag/env).
DEFAULT_MAX_BYTES = 100 * 1024 * 1024  # 100 MiB


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0
    ERROR = 1  # Output could not be written
    FATAL = 2  # Input could not be read or decoded
    USAGE = 64  # Command line usage error


def resolve_max_bytes(max_bytes: int | None) -> int | None:
    """
    Effective input size limit.

    The flag wins over the environment; 0 or less means unlimited.

    Raises:
        ValueError: If the environment value is not an integer
    """
    if max_bytes is not None:
        return None if max_bytes <= 0 else max_bytes

    env_value = os.environ.get(ENV_MAX_BYTES)
    if env_value:
        try:
            parsed = int(env_value)
        except ValueError:
            raise ValueError(f"{ENV_MAX_BYTES} must be an integer") from None
        return None if parsed <= 0 else parsed

    return DEFAULT_MAX_BYTES


def build_config(encoding: str | None, convert: bool) -> ParserConfig:
    """Parser configuration from CLI options, falling back to the environment."""
    source_encoding = encoding or os.environ.get(ENV_ENCODING)
    if source_encoding:
        return ParserConfig(source_encoding=source_encoding, convert_encoding=convert)
    return ParserConfig(convert_encoding=convert)
