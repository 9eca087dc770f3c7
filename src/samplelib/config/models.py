"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, samplelib.toml only contains
overrides. An empty file (or no file at all) yields a working library.
"""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_NAME = "samplelib"
DEFAULT_DESCRIPTION = "Sample Python Library Template"
FALLBACK_VERSION = "0.0.0-development"


class LibConfig(BaseModel):
    """Library identity exposed by a configuration provider.

    Immutable value: all three fields are required text.
    """

    model_config = {"frozen": True}

    name: str
    version: str
    description: str


# --- samplelib.toml sections ---


class LibrarySection(BaseModel):
    """[library] section.

    ``version`` is optional; when unset the installed package version is used.
    """

    model_config = {"frozen": True}

    name: str = DEFAULT_NAME
    description: str = DEFAULT_DESCRIPTION
    version: str | None = None
