"""
Field declarations for values that travel through the trace codec.

A field declared with ``optional=True`` may be missing from a document and
then decodes to its default; all other fields are required on decode.
``name`` overrides the key used on the wire (e.g. ``from``, which is a
Python keyword).
"""

from dataclasses import MISSING, Field, field
from typing import Any, Callable, Optional


WIRE_NAME = "wire_name"
WIRE_OPTIONAL = "wire_optional"


def wire_field(
    default: Any = MISSING,
    *,
    default_factory: Callable[[], Any] = MISSING,  # type: ignore[assignment]
    name: Optional[str] = None,
    optional: bool = False,
) -> Any:
    """Declare a dataclass field with wire metadata."""
    metadata = {WIRE_OPTIONAL: optional}
    if name is not None:
        metadata[WIRE_NAME] = name
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def wire_name(f: Field) -> str:
    return f.metadata.get(WIRE_NAME, f.name)


def is_optional(f: Field) -> bool:
    return bool(f.metadata.get(WIRE_OPTIONAL, False))
