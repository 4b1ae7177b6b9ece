"""Base protocol for document loaders."""

from typing import List, Protocol, Union
from pathlib import Path

from ..models import IacDocument


class DocumentLoader(Protocol):
    """Protocol for loaders that split an IaC file into located documents."""
    kind: str

    def load(self, file_path: Union[str, Path]) -> List[IacDocument]:
        """
        Load every document of a file together with its source line range.

        Args:
            file_path: Path to the file to load

        Returns:
            IacDocument records in file order

        Raises:
            FileNotFoundError: If file_path does not exist
            LoaderError: If the file cannot be read or decoded; the partial
                record list is available on the error
        """
        ...
