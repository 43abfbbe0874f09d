"""
Exceptions and structured error reports for an export parsing run.

Every fatal condition raised by the pipeline derives from
:class:`WordPressExportError` so that callers can stop the whole run with a
single ``except`` clause.  Recoverable conditions (an unparseable date, an
image without a description) are never raised; they degrade the produced
record instead.

``report_error`` appends a JSON Lines entry under the configured report
directory so that the cause of an aborted run can be inspected afterwards.
The ``ERRORS`` dictionary maps error codes to human readable messages.
Codes not present in the dictionary fall back to the code itself.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Iterable, Optional

ERRORS: Dict[str, str] = {
    "CONFIGURATION": "Invalid configuration",
    "IMAGE_RESOLUTION": "Could not resolve a scraped image URL",
    "EXPORT_DOCUMENT": "Could not read the export document",
    "MISSING_ELEMENT": "Mandatory element missing from export item",
    "PRE_FLIGHT": "Pre-flight check failed",
}


class WordPressExportError(Exception):
    """Base class for fatal errors that abort a parsing run."""

    code = "EXPORT_DOCUMENT"


class ConfigurationError(WordPressExportError):
    """Raised when the run is configured with unknown or invalid values."""

    code = "CONFIGURATION"

    def __init__(self, message: str, unknown_fields: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.unknown_fields = list(unknown_fields)


class ImageResolutionError(WordPressExportError):
    """Raised when a relative image reference has no absolute base to resolve against."""

    code = "IMAGE_RESOLUTION"

    def __init__(self, image_url: str, post_link: Optional[str]) -> None:
        super().__init__(
            f"Unable to determine absolute URL from scraped image URL '{image_url}' "
            f"and post link URL '{post_link}'."
        )
        self.image_url = image_url
        self.post_link = post_link


class ExportDocumentError(WordPressExportError):
    """Raised when the export file cannot be read or is not well-formed XML."""

    code = "EXPORT_DOCUMENT"


class MissingElementError(ExportDocumentError):
    """Raised when a mandatory child element is absent from an export node."""

    code = "MISSING_ELEMENT"

    def __init__(self, parent: str, name: str) -> None:
        super().__init__(f"Element <{parent}> has no child named '{name}'.")
        self.parent = parent
        self.name = name


def _write_jsonl(report_dir: str, filename: str, data: Dict[str, Any]) -> str:
    """Append ``data`` as a JSON object followed by a newline and return the file path."""
    os.makedirs(report_dir, exist_ok=True)
    path = os.path.join(report_dir, filename)
    with open(path, "a", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)
        f.write("\n")
    return path


def report_error(
    code: str,
    exc: Optional[BaseException] = None,
    *,
    report_dir: str,
    context: Optional[Dict[str, Any]] = None,
) -> str:
    """Log a fatal error event for the current run.

    Parameters
    ----------
    code:
        A key identifying the type of error.  If ``code`` is present in
        :data:`ERRORS` its value will be used as the message.
    exc:
        Optional exception instance that aborted the run.  Its string
        representation is included in the log entry.
    report_dir:
        Directory holding ``errors.jsonl``.  Created if missing.
    context:
        Optional dictionary of additional fields (input path, etc.) merged
        into the entry.

    Returns
    -------
    str
        The path of the report file that was appended to.
    """
    message = ERRORS.get(code, code)
    entry: Dict[str, Any] = {"code": code, "message": message}
    if exc is not None:
        entry["error"] = str(exc)
    if context:
        entry.update(context)
    print(f"[ERROR] {message} - {exc}" if exc is not None else f"[ERROR] {message}")
    return _write_jsonl(report_dir, "errors.jsonl", entry)
