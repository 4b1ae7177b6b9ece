"""Loader configuration."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Environment variable -> LoaderConfig field; values are validated by pydantic
_ENV_FIELDS = {
    "IAC_LOADER_ENCODING": "encoding",
    "IAC_LOADER_MARKER": "marker",
    "IAC_LOADER_SORT_KEYS": "sort_keys",
    "IAC_LOADER_ALLOW_UNICODE": "allow_unicode",
    "IAC_LOADER_INDENT": "indent",
    "IAC_LOADER_MAX_EXPANDED_NODES": "max_expanded_nodes",
}


class LoaderConfig(BaseModel):
    """Configuration for the line scan, the decoder and the canonical encoder."""
    encoding: str = Field(default="utf-8-sig", description="Text encoding used by the line scan")
    marker: str = Field(default="---", min_length=1, description="Line prefix that closes a document")

    # Canonical encoder options, passed through to yaml.dump
    sort_keys: bool = Field(default=True, description="Sort mapping keys when re-encoding")
    allow_unicode: bool = Field(default=True, description="Emit non-ASCII characters unescaped")
    default_flow_style: bool = Field(default=False, description="Use flow style for collections")
    indent: int = Field(default=2, ge=2, le=9, description="Indentation width for block collections")

    max_expanded_nodes: int = Field(
        default=250_000, ge=1, description="Maximum nodes in one document once aliases are expanded"
    )

    def model_post_init(self, __context):
        """Validate configuration after initialization."""
        if "\n" in self.marker or "\r" in self.marker:
            raise ValueError("marker must not contain line breaks")

    def dump_options(self) -> dict:
        return {
            "sort_keys": self.sort_keys,
            "allow_unicode": self.allow_unicode,
            "default_flow_style": self.default_flow_style,
            "indent": self.indent,
        }


def load_config_from_env() -> LoaderConfig:
    """
    Build a LoaderConfig from IAC_LOADER_* environment variables.

    A .env file in the working directory is loaded first. Unset or blank
    variables keep their defaults.

    Raises:
        ValidationError: If a variable holds an invalid value
    """
    load_dotenv()

    overrides = {}
    for env_name, field in _ENV_FIELDS.items():
        raw = os.getenv(env_name)
        if raw is not None and raw.strip():
            overrides[field] = raw.strip()

    if overrides:
        logger.debug(f"Loader config overrides from environment: {sorted(overrides)}")
    return LoaderConfig(**overrides)
