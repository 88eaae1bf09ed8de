"""Read, normalize and write a single Checkstyle configuration."""
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config.models import AppSettings, FetchSettings, OutputSettings
from .downloader import fetch_document
from .model.element import Document
from .model.xml_codec import parse_document, read_document, to_xml_bytes
from .normalize.engine import describe_processing, normalize_document, was_changed

logger = logging.getLogger(__name__)

DEFAULT_INPUT = Path("checkstyle-in.xml")
DEFAULT_OUTPUT = Path("checkstyle-out.xml")
STDOUT = "-"


@dataclass
class PipelineResult:
    source: str
    changed: bool
    output: bytes
    written_to: Optional[Path] = None


def is_stdout(path: Optional[Path]) -> bool:
    return path is not None and str(path) == STDOUT


def write_atomically(path: Path, data: bytes) -> None:
    """Replace ``path`` with ``data``; the previous content stays intact if writing fails."""
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        if path.exists():
            shutil.copymode(path, temp_name)
        os.replace(temp_name, path)
    except BaseException:
        if os.path.exists(temp_name):
            os.unlink(temp_name)
        raise


def load_document(input_file: Optional[Path], uri: Optional[str], fetch: FetchSettings) -> Document:
    if uri:
        data = fetch_document(uri, timeout=fetch.timeout, user_agent=fetch.user_agent)
        return parse_document(data)
    return read_document(input_file or DEFAULT_INPUT)


def render_document(document: Document, output: OutputSettings) -> bytes:
    return to_xml_bytes(
        document,
        pretty_print=output.pretty_print,
        xml_declaration=output.xml_declaration,
        encoding=output.encoding,
    )


def run_pipeline(settings: AppSettings,
                 input_file: Optional[Path] = None,
                 uri: Optional[str] = None,
                 output_file: Optional[Path] = None,
                 in_place: bool = False,
                 check: bool = False) -> PipelineResult:
    """
    Normalize one document and write the result.

    Args:
        settings: Resolved application settings
        input_file: File to read; defaults to ``checkstyle-in.xml`` when no ``uri`` is given
        uri: URI to fetch instead of reading a file
        output_file: Destination; ``-`` leaves writing to the caller (stdout)
        in_place: Overwrite ``input_file``
        check: Only determine whether the document would change

    Returns:
        The outcome, including the serialized document

    Raises:
        DocumentError, FetchError, ValueError, OSError: Passed on to the caller
    """
    source = uri or str(input_file or DEFAULT_INPUT)
    logger.debug(f"Loading {source}")
    original = load_document(input_file, uri, settings.fetch)

    options = settings.normalize
    normalized = normalize_document(original, options)
    changed = was_changed(original, normalized)
    rendered = render_document(normalized, settings.output)
    result = PipelineResult(source=source, changed=changed, output=rendered)

    if check:
        if changed:
            logger.info(f"{source} is not in canonical form (would be {describe_processing(options)}).")
        else:
            logger.info(f"{source} is already in canonical form.")
        return result

    if in_place:
        destination: Optional[Path] = input_file or DEFAULT_INPUT
    elif is_stdout(output_file):
        destination = None
    else:
        destination = output_file or DEFAULT_OUTPUT

    if destination is not None:
        write_atomically(destination, rendered)
        result.written_to = destination
        logger.debug(f"Wrote {len(rendered)} bytes to {destination}")

    if changed:
        logger.info(f"{source} was modified: {describe_processing(options)}.")
    else:
        logger.info(f"{source} is already in canonical form.")
    return result
