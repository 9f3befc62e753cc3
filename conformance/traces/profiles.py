"""
Wire schema profiles.

A profile pins the wire schema a trace document is written against. Fields
that a protocol version cannot report are listed per variant tag (or under
``CHAIN_STATE`` for partial chain state). The encoder leaves them out, and
the decoder accepts documents where they are missing.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Mapping

from .errors import UnknownProfileError


CHAIN_STATE = "chain_state"


@dataclass(frozen=True)
class SchemaProfile:
    """Configuration of the trace wire schema."""
    name: str
    omitted_fields: Mapping[str, FrozenSet[str]] = field(default_factory=dict)
    # reject fields the decoder does not know
    strict: bool = True

    def omits(self, scope: str, field_name: str) -> bool:
        return field_name in self.omitted_fields.get(scope, frozenset())


CURRENT = SchemaProfile(name="current")

# Reduced schema for traces replayed across major protocol versions
COMPATIBILITY = SchemaProfile(
    name="compatibility",
    omitted_fields={
        CHAIN_STATE: frozenset({"proposed_consumer_chains"}),
        "consumer_addition": frozenset({"top_n"}),
    },
    strict=False,
)

PROFILES: Dict[str, SchemaProfile] = {
    CURRENT.name: CURRENT,
    COMPATIBILITY.name: COMPATIBILITY,
}


def get_profile(name: str) -> SchemaProfile:
    """Look up a registered profile by name."""
    try:
        return PROFILES[name]
    except KeyError:
        raise UnknownProfileError(name) from None
