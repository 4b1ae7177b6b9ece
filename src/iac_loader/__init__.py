"""Split multi-document IaC files into documents with source line ranges."""

from .config import LoaderConfig, load_config_from_env
from .exceptions import (
    DocumentCountMismatchError,
    DocumentDecodeError,
    DocumentEncodeError,
    DocumentReadError,
    LineScanError,
    LoaderError,
)
from .loaders import DocumentLoader, YAMLLoader, get_loader, load_yaml, supported_kinds
from .models import IacDocument, YAML_DOC

__all__ = [
    "DocumentCountMismatchError",
    "DocumentDecodeError",
    "DocumentEncodeError",
    "DocumentLoader",
    "DocumentReadError",
    "IacDocument",
    "LineScanError",
    "LoaderConfig",
    "LoaderError",
    "YAMLLoader",
    "YAML_DOC",
    "get_loader",
    "load_config_from_env",
    "load_yaml",
    "supported_kinds",
]
