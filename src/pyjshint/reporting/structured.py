# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Machine-readable reporters (XML and JSON)."""

from __future__ import annotations

import json
import re
from typing import Final
from xml.sax.saxutils import escape

from ..models import FileResult, Report

XML_HEADER: Final[str] = '<?xml version="1.0" encoding="utf-8"?>'
_ATTRIBUTE_ENTITIES: Final[dict[str, str]] = {
    '"': "&quot;",
    "'": "&apos;",
    # whitespace would otherwise be normalised to spaces by XML parsers
    "\t": "&#9;",
    "\n": "&#10;",
    "\r": "&#13;",
}
# characters XML 1.0 cannot carry, even as character references
_XML_INVALID_CHARS: Final[re.Pattern[str]] = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")
XML_REPLACEMENT_CHAR: Final[str] = "\ufffd"


def _attr(name: str, value: object) -> str:
    text = _XML_INVALID_CHARS.sub(XML_REPLACEMENT_CHAR, str(value))
    return f' {name}="{escape(text, _ATTRIBUTE_ENTITIES)}"'


class XmlReporter:
    """Render a ``<jshint>`` document with one ``<file>`` element per result."""

    name = "xml"

    def render(self, report: Report) -> str:
        output = [XML_HEADER, "<jshint>"]
        for result in report.results:
            output.append(f"    <file{_attr('name', result.file)}>")
            for diagnostic in result.diagnostics:
                output.append(
                    "        <issue"
                    f"{_attr('line', diagnostic.line)}"
                    f"{_attr('char', diagnostic.character)}"
                    f"{_attr('reason', diagnostic.reason)}"
                    f"{_attr('evidence', diagnostic.evidence)}"
                    "/>",
                )
            output.append("    </file>")
        output.append("</jshint>")
        return "\n".join(output)


def _serialize_result(result: FileResult) -> dict[str, object]:
    return {
        "file": result.file,
        "errors": [diagnostic.model_dump() for diagnostic in result.diagnostics],
    }


class JsonReporter:
    """Render the report as a JSON document with per-file errors and a summary."""

    name = "json"

    def render(self, report: Report) -> str:
        payload = {
            "files": [_serialize_result(result) for result in report.results],
            "summary": {
                "files": report.file_count,
                "expected_files": report.expected_file_count,
                "errors": report.total_error_count,
                "passed": report.total_error_count == 0,
            },
        }
        return json.dumps(payload, indent=2)


__all__ = ["XML_REPLACEMENT_CHAR", "JsonReporter", "XmlReporter"]
