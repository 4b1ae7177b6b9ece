"""YAML loader that splits multi-document files and records line ranges.

The file is read twice. The first pass scans lines for end-of-directives
markers to establish document boundaries; the second pass decodes the YAML
stream and re-encodes each document canonically. Documents are attached to
boundaries by position, since the parser does not report where sibling
documents start and end.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

import yaml

from ..config import LoaderConfig
from ..exceptions import (
    DocumentCountMismatchError,
    DocumentDecodeError,
    DocumentEncodeError,
    DocumentReadError,
    LineScanError,
    LoaderError,
)
from ..models import IacDocument, YAML_DOC

logger = logging.getLogger(__name__)

_NULL_TAG = "tag:yaml.org,2002:null"


def scan_boundaries(file_path: Union[str, Path], config: Optional[LoaderConfig] = None) -> List[IacDocument]:
    """
    Find document line ranges by scanning for marker lines.

    A marker line closes the current document, so it is the last line of the
    range before it. One trailing record is always added for whatever follows
    the last marker (the whole file when there is no marker).

    Args:
        file_path: Path to the YAML file
        config: Loader configuration (defaults if not provided)

    Returns:
        Boundary records with content unset

    Raises:
        DocumentReadError: If the file cannot be opened
        LineScanError: If reading fails mid-scan; carries the records found so far
    """
    config = config or LoaderConfig()
    path_str = str(file_path)
    documents: List[IacDocument] = []

    try:
        handle = open(file_path, "r", encoding=config.encoding)
    except OSError as e:
        logger.error(f"Cannot open {path_str} for line scan: {e}")
        raise DocumentReadError(f"Cannot open {path_str}: {e}", path_str, documents) from e

    start_line = 1
    current_line = 1
    read_error: Optional[Exception] = None
    with handle:
        try:
            for line in handle:
                if line.startswith(config.marker):
                    documents.append(_boundary(start_line, current_line, path_str))
                    logger.debug(f"Document boundary at {path_str}:{current_line}")
                    start_line = current_line + 1
                current_line += 1
        except (OSError, UnicodeDecodeError) as e:
            read_error = e

    # The trailing record is kept even when the scan failed
    documents.append(_boundary(start_line, current_line, path_str))

    if read_error is not None:
        logger.error(f"Line scan failed at {path_str}:{current_line}: {read_error}")
        raise LineScanError(
            f"Line scan failed at {path_str}:{current_line}: {read_error}", path_str, documents
        ) from read_error

    return documents


def _boundary(start_line: int, end_line: int, file_path: str) -> IacDocument:
    return IacDocument(kind=YAML_DOC, start_line=start_line, end_line=end_line, file_path=file_path)


def _is_empty_document(node: yaml.Node) -> bool:
    # An empty document composes to an implicit null scalar with no text
    return isinstance(node, yaml.ScalarNode) and node.tag == _NULL_TAG and node.value == ""


def _expanded_size(node: yaml.Node, sizes: dict, active: set) -> int:
    """Count the nodes a document holds once every alias is written out in full."""
    key = id(node)
    if key in sizes:
        return sizes[key]
    if key in active:
        # Self reference; the encoder rejects it
        return 1

    if isinstance(node, yaml.SequenceNode):
        children = node.value
    elif isinstance(node, yaml.MappingNode):
        children = [child for pair in node.value for child in pair]
    else:
        children = []

    active.add(key)
    size = 1 + sum(_expanded_size(child, sizes, active) for child in children)
    active.discard(key)
    sizes[key] = size
    return size


class CanonicalDumper(yaml.SafeDumper):
    """SafeDumper that writes shared values out in full instead of as aliases."""

    def ignore_aliases(self, data):
        return True


def canonicalize(value, config: Optional[LoaderConfig] = None) -> bytes:
    """Re-encode a decoded value with the canonical encoder options."""
    config = config or LoaderConfig()
    return yaml.dump(value, Dumper=CanonicalDumper, encoding="utf-8", **config.dump_options())


def iter_canonical_documents(
    file_path: Union[str, Path], config: Optional[LoaderConfig] = None
) -> Iterator[Optional[bytes]]:
    """
    Decode the YAML stream of a file and yield each document canonically re-encoded.

    Empty documents (a marker with nothing after it) still take a position in
    the stream and yield None.

    Args:
        file_path: Path to the YAML file
        config: Loader configuration (defaults if not provided)

    Yields:
        Canonical UTF-8 bytes per document, or None for an empty document

    Raises:
        DocumentReadError: If the file cannot be read
        DocumentDecodeError: If a document is malformed; later documents are not decoded
        DocumentEncodeError: If a decoded value cannot be re-encoded
    """
    config = config or LoaderConfig()
    path_str = str(file_path)

    try:
        with open(file_path, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.error(f"Cannot read {path_str} for decoding: {e}")
        raise DocumentReadError(f"Cannot read {path_str}: {e}", path_str) from e

    index = 0
    try:
        # The reader checks encoding and printable characters up front
        loader = yaml.SafeLoader(data)
    except yaml.YAMLError as e:
        logger.error(f"Cannot decode {path_str}: {e}")
        raise DocumentDecodeError(f"Cannot decode {path_str}: {e}", path_str, index) from e

    try:
        while True:
            try:
                if not loader.check_node():
                    break
                node = loader.get_node()
                empty = _is_empty_document(node)
                expanded = _expanded_size(node, {}, set())
                if expanded > config.max_expanded_nodes:
                    logger.error(
                        f"Document {index} of {path_str} expands to {expanded} nodes "
                        f"(limit {config.max_expanded_nodes})"
                    )
                    raise DocumentDecodeError(
                        f"Excessive aliasing in document {index} of {path_str}: expands to "
                        f"{expanded} nodes, limit is {config.max_expanded_nodes}",
                        path_str,
                        index,
                    )
                value = loader.construct_document(node)
            except (yaml.YAMLError, RecursionError) as e:
                # Deeply nested collections exhaust the recursive composer
                logger.error(f"Invalid YAML in document {index} of {path_str}: {e}")
                raise DocumentDecodeError(
                    f"Invalid YAML in document {index} of {path_str}: {e}", path_str, index
                ) from e

            if empty:
                logger.debug(f"Document {index} of {path_str} is empty")
                yield None
            else:
                try:
                    blob = canonicalize(value, config)
                except (yaml.YAMLError, RecursionError) as e:
                    # Self-referencing values cannot be written without aliases
                    logger.error(f"Cannot re-encode document {index} of {path_str}: {e}")
                    raise DocumentEncodeError(
                        f"Cannot re-encode document {index} of {path_str}: {e}", path_str, index
                    ) from e
                yield blob
            index += 1
    finally:
        loader.dispose()


def reconcile(documents: List[IacDocument], blobs: Iterable[Optional[bytes]]) -> int:
    """
    Attach decoded documents to boundary records by position.

    Args:
        documents: Boundary records in file order, updated in place
        blobs: Canonical content per decoded document, in stream order

    Returns:
        Number of decoded documents attached

    Raises:
        DocumentCountMismatchError: If there are more blobs than records
        LoaderError: Any error raised while producing blobs, with documents attached
    """
    index = 0
    try:
        for blob in blobs:
            if index > len(documents) - 1:
                file_path = documents[0].file_path if documents else ""
                logger.error(
                    f"Decoded more documents than the {len(documents)} boundaries found in {file_path}"
                )
                raise DocumentCountMismatchError(file_path, len(documents), index, documents)
            documents[index].content = blob
            index += 1
    except LoaderError as e:
        e.documents = documents
        raise
    return index


class YAMLLoader:
    """Loader for single or multi-document YAML files."""
    kind = YAML_DOC

    def __init__(self, config: Optional[LoaderConfig] = None):
        self.config = config or LoaderConfig()

    def load(self, file_path: Union[str, Path]) -> List[IacDocument]:
        """
        Load all YAML documents of a file with their line ranges.

        Args:
            file_path: Path to the YAML file

        Returns:
            IacDocument records in file order; records without a decoded
            document keep content set to None

        Raises:
            FileNotFoundError: If file_path does not exist
            LoaderError: On any read, decode or reconciliation failure; the
                partial record list is on ``error.documents``
        """
        if not Path(file_path).exists():
            raise FileNotFoundError(f"YAML file not found: {file_path}")

        logger.info(f"Loading YAML documents from {file_path}")

        documents = scan_boundaries(file_path, self.config)
        decoded = reconcile(documents, iter_canonical_documents(file_path, self.config))

        if decoded < len(documents):
            logger.warning(
                f"Decoded {decoded} documents for {len(documents)} boundaries in {file_path}; "
                f"{len(documents) - decoded} records have no content"
            )
        logger.info(f"Loaded {len(documents)} YAML documents from {file_path}")
        return documents


def load_yaml(file_path: Union[str, Path], config: Optional[LoaderConfig] = None) -> List[IacDocument]:
    """Load a YAML file into located documents. See YAMLLoader.load."""
    return YAMLLoader(config).load(file_path)
