from typing import Any, Optional

import yaml
from pydantic import BaseModel

# Kind tag for documents produced by the YAML loader
YAML_DOC = "yaml"


class IacDocument(BaseModel):
    """One document of an infrastructure-as-code file and where it came from."""
    kind: str = YAML_DOC
    start_line: int
    end_line: int
    file_path: str

    # Canonical re-encoding of the decoded document, None until matched
    content: Optional[bytes] = None

    @property
    def has_content(self) -> bool:
        return self.content is not None

    @property
    def line_count(self) -> int:
        """Number of source lines covered, marker line included."""
        return self.end_line - self.start_line + 1

    @property
    def location(self) -> str:
        """Source location in ``path:start-end`` form for attributing findings."""
        return f"{self.file_path}:{self.start_line}-{self.end_line}"

    def decode(self) -> Any:
        """
        Decode the canonical content back into a generic value.

        Returns:
            dict, list or scalar for the document body; None when no content was attached
        """
        if self.content is None:
            return None
        return yaml.safe_load(self.content)
