"""
Trace document parser (JSON or YAML).
"""

import json
import logging
import os
from typing import Any

import yaml

from .codec import decode_trace
from .errors import TraceDecodeError, TraceIOError
from .profiles import CURRENT, SchemaProfile
from .schema import Trace

logger = logging.getLogger(__name__)

JSON = "json"
YAML = "yaml"

_YAML_EXTENSIONS = (".yaml", ".yml")


def format_for_path(file_path: str) -> str:
    """Pick the document format from a file extension; JSON unless YAML."""
    _, ext = os.path.splitext(file_path)
    return YAML if ext.lower() in _YAML_EXTENSIONS else JSON


def _load_document(content: str, fmt: str) -> Any:
    if fmt == JSON:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise TraceDecodeError(f"malformed JSON document: {e}") from e
    if fmt == YAML:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise TraceDecodeError(f"malformed YAML document: {e}") from e
    raise ValueError(f"Unsupported trace format: {fmt}")


def parse_trace(content: str, fmt: str = JSON, profile: SchemaProfile = CURRENT) -> Trace:
    """Parse a trace from document text."""
    return decode_trace(_load_document(content, fmt), profile)


def read_trace_from_file(file_path: str, profile: SchemaProfile = CURRENT) -> Trace:
    """Load a trace from a JSON or YAML file."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise TraceIOError(f"cannot read trace file {file_path}: {e}", file_path) from e
    except UnicodeDecodeError as e:
        raise TraceDecodeError(f"malformed document encoding: {e}") from e

    trace = parse_trace(content, format_for_path(file_path), profile)
    logger.info("Read trace with %d steps from %s", len(trace), file_path)
    return trace
