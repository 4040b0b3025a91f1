"""
ValueStream Repository
Introductory remarks: This module is part of the ValueStream codebase.

Central configuration constants for the value stream map model.
"""

from __future__ import annotations

# Node type tags ------------------------------------------------------------

PIPELINE_NODE_TYPE = "PIPELINE"
"""Raw type tag of upstream/downstream pipeline nodes."""

MATERIAL_NODE_TYPE = "MATERIAL"
"""Raw type tag of material (SCM, package, ...) nodes."""

GENERIC_NODE_TYPE = "GENERIC"
"""Tag emitted for every node that is neither a pipeline nor a material."""

# Stage status --------------------------------------------------------------

UNKNOWN_STAGE_STATUS = "Unknown"
"""Status of a stage that has not been scheduled; it has no detail page."""

# Links ---------------------------------------------------------------------

DEFAULT_URL_PREFIX = "/go"
"""Mount point of the server the generated locators point into."""
