"""genai_content.config.defaults
=============================

Central place for small, stable default values used across the genai_content
package. These defaults can be overridden via environment variables or an
external configuration file, but provide sensible fallbacks for local
development and tests.

This module intentionally avoids importing from other genai_content packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Speaker roles ----

# Role tag for turns authored by the end user.
USER_ROLE = "user"
# Role tag for turns produced by the model.
MODEL_ROLE = "model"

# ---- Decoding ----

# Raise InvalidBlobError when an inline blob lacks mimeType/data.
STRICT_BLOBS_DEFAULT = True

# ---- Logging ----

LOG_LEVEL_DEFAULT = "INFO"
LOG_JSON_DEFAULT = True

# Environment variable names.
ENV_CONFIG_FILE = "GENAI_CONTENT_CONFIG_FILE"
ENV_STRICT_BLOBS = "GENAI_CONTENT_STRICT_BLOBS"
ENV_LOG_LEVEL = "GENAI_CONTENT_LOG_LEVEL"
ENV_LOG_JSON = "GENAI_CONTENT_LOG_JSON"
