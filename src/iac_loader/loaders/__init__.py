"""Document loaders for IaC file formats."""

from typing import List, Optional

from ..config import LoaderConfig
from .base import DocumentLoader
from .yaml_loader import YAMLLoader, load_yaml

# Registry of available loaders
_LOADERS = {
    "yaml": YAMLLoader,
}


def supported_kinds() -> List[str]:
    return sorted(_LOADERS.keys())


def get_loader(kind: str, config: Optional[LoaderConfig] = None) -> DocumentLoader:
    """
    Get appropriate loader for the given document kind.

    Args:
        kind: Document kind tag ("yaml")
        config: Optional loader configuration

    Returns:
        DocumentLoader instance for the kind

    Raises:
        ValueError: If kind is not supported
    """
    if kind not in _LOADERS:
        supported = ", ".join(supported_kinds())
        raise ValueError(f"Unsupported document kind: {kind}. Supported kinds: {supported}")

    loader_class = _LOADERS[kind]
    return loader_class(config)


__all__ = [
    "DocumentLoader",
    "YAMLLoader",
    "get_loader",
    "load_yaml",
    "supported_kinds",
]
