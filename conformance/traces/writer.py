"""
Trace document writer (JSON or YAML).

Files are written atomically: the document is fully encoded first, written
to a temporary file next to the target and then moved into place. A failed
write never leaves a partial trace at the target path.
"""

import json
import logging
import os
import tempfile
from typing import List, Union

import yaml

from .codec import encode_trace
from .errors import TraceIOError
from .parser import JSON, YAML, format_for_path
from .profiles import CURRENT, SchemaProfile
from .schema import Step, Trace

logger = logging.getLogger(__name__)


def _file_mode() -> int:
    # mkstemp creates files as 0600; written traces follow the umask
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def dump_trace(
    trace: Union[Trace, List[Step]],
    fmt: str = JSON,
    profile: SchemaProfile = CURRENT,
) -> str:
    """Serialize a trace to document text."""
    document = encode_trace(trace, profile)
    if fmt == JSON:
        return json.dumps(document, indent=2, allow_nan=False) + "\n"
    if fmt == YAML:
        return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)
    raise ValueError(f"Unsupported trace format: {fmt}")


def write_trace_to_file(
    file_path: str,
    trace: Union[Trace, List[Step]],
    profile: SchemaProfile = CURRENT,
) -> None:
    """Write a trace to a JSON or YAML file (format chosen by extension)."""
    content = dump_trace(trace, format_for_path(file_path), profile)

    directory = os.path.dirname(os.path.abspath(file_path))
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".trace-", suffix=".tmp", dir=directory)
    except OSError as e:
        raise TraceIOError(f"cannot write trace file {file_path}: {e}", file_path) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(tmp_path, _file_mode())
        os.replace(tmp_path, file_path)
    except OSError as e:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise TraceIOError(f"cannot write trace file {file_path}: {e}", file_path) from e

    logger.info("Wrote trace with %d steps to %s", len(trace), file_path)
