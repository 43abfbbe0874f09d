from __future__ import annotations

import os
from typing import Mapping, Optional

from ..frontmatter.getters import FRONTMATTER_GETTERS, FrontmatterGetter
from ..frontmatter.populate import resolve_frontmatter_fields
from ..models.config import ExportConfig
from .console import log_message
from .errors import WordPressExportError


class PreFlightCheckError(WordPressExportError):
    """Custom exception for pre-flight check failures."""

    code = "PRE_FLIGHT"


def run_pre_flight_checks(
    config: ExportConfig, registry: Optional[Mapping[str, FrontmatterGetter]] = None
) -> None:
    """
    Verifies that a run is correctly configured before any post is processed.

    Args:
        config: The run configuration.
        registry: Frontmatter getters the requested fields are checked
            against.  Defaults to the built-in registry.

    Raises:
        PreFlightCheckError: If the input export file does not exist.
        ConfigurationError: If any requested frontmatter field is unknown.
    """
    log_message("Running pre-flight checks...")

    if not os.path.isfile(config.input):
        raise PreFlightCheckError(f"Export file not found: {config.input}")

    resolve_frontmatter_fields(config.frontmatter_fields, registry or FRONTMATTER_GETTERS)

    log_message("Pre-flight checks passed successfully.")
