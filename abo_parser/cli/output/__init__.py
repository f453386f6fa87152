"""
Output adapters for CLI.

Provides different output formats: terminal, JSON.
"""

from abo_parser.cli.output.base import OutputAdapter, OutputFormat, get_output_adapter
from abo_parser.cli.output.json import JsonOutput
from abo_parser.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]
