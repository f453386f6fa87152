"""
JSON output adapter.

Renders parsed documents as JSON for machine processing.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any, TextIO

from abo_parser.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from abo_parser.core.parser.models import ParsedDocument

# Control characters except TAB, LF and CR
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def clean_for_json(data: Any) -> Any:
    """Strip control characters from every string in a nested structure."""
    if isinstance(data, dict):
        return {key: clean_for_json(value) for key, value in data.items()}
    if isinstance(data, list):
        return [clean_for_json(item) for item in data]
    if isinstance(data, str):
        return _CONTROL_CHARS.sub("", data)
    return data


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, indent: int | None = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_document(self, document: ParsedDocument) -> str:
        """Render document as JSON, keeping non-ASCII characters readable."""
        return json.dumps(clean_for_json(document.to_dict()), indent=self.indent, ensure_ascii=False)
