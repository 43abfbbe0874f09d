"""
Utility helpers used by the export tool.

This subpackage exposes the exception taxonomy, structured error reports and
operator log helpers.
"""

from .console import log_heading, log_message
from .errors import (
    ERRORS,
    ConfigurationError,
    ExportDocumentError,
    ImageResolutionError,
    MissingElementError,
    WordPressExportError,
    report_error,
)

__all__ = [
    "ERRORS",
    "ConfigurationError",
    "ExportDocumentError",
    "ImageResolutionError",
    "MissingElementError",
    "WordPressExportError",
    "log_heading",
    "log_message",
    "report_error",
]
