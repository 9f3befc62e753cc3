"""
Trace codec.

Converts traces to and from plain JSON/YAML-compatible structures. Field
types are read from the dataclass annotations, so every action, proposal and
state field is encoded and checked the same way:

- actions and proposals become ``{"type": <tag>, <field>: <value>, ...}``
- partial chain state keeps only the fields that are specified
- a step becomes ``{"action": ..., "state": {<chain>: <chain state>}}``
- a trace is the list of its steps, in order

Mapping keys are written as strings and restored to the key type on decode.
Integers must be real integers on decode (never booleans or floats) and may
not be negative. Floats must be finite.
"""

import logging
import math
from dataclasses import Field, fields, is_dataclass
from functools import lru_cache
from typing import (
    Any, Dict, List, Mapping, Optional, Type, TypeVar, Union,
    get_args, get_origin, get_type_hints,
)

from .actions import ACTION_TYPES, Action
from .errors import TraceDecodeError, TraceEncodeError
from .profiles import CHAIN_STATE, CURRENT, SchemaProfile
from .proposals import PROPOSAL_TYPES, Proposal
from .schema import ChainState, State, Step, Trace
from .wire import is_optional, wire_name

logger = logging.getLogger(__name__)

TYPE_KEY = "type"
ACTION_KEY = "action"
STATE_KEY = "state"

T = TypeVar("T")


# =============================================================================
# Type Introspection
# =============================================================================

@lru_cache(maxsize=None)
def _field_hints(cls: type) -> Dict[str, Any]:
    return get_type_hints(cls)


def _resolve(hint: Any) -> Any:
    """Strip NewType wrappers down to the runtime type."""
    while hasattr(hint, "__supertype__"):
        hint = hint.__supertype__
    return hint


def _non_none_arg(hint: Any) -> Any:
    args = [a for a in get_args(hint) if a is not type(None)]
    if len(args) != 1:
        raise TypeError(f"unsupported union type: {hint}")
    return args[0]


def _type_name(value: Any) -> str:
    return type(value).__name__


# =============================================================================
# Encoding
# =============================================================================

def _encode_key(key: Any, hint: Any, path: str) -> str:
    hint = _resolve(hint)
    if hint is int:
        if isinstance(key, bool) or not isinstance(key, int):
            raise TraceEncodeError(f"expected integer key, got {_type_name(key)}", path)
        if key < 0:
            raise TraceEncodeError(f"key must be >= 0, got {key}", path)
        return str(key)
    if not isinstance(key, str):
        raise TraceEncodeError(f"expected string key, got {_type_name(key)}", path)
    return key


def _encode_value(value: Any, hint: Any, path: str, profile: SchemaProfile) -> Any:
    hint = _resolve(hint)
    origin = get_origin(hint)

    if origin is Union:
        if value is None:
            raise TraceEncodeError("unspecified value cannot be encoded", path)
        return _encode_value(value, _non_none_arg(hint), path, profile)

    if origin is list:
        if not isinstance(value, (list, tuple)):
            raise TraceEncodeError(f"expected list, got {_type_name(value)}", path)
        (item_hint,) = get_args(hint)
        return [
            _encode_value(item, item_hint, f"{path}[{i}]", profile)
            for i, item in enumerate(value)
        ]

    if origin is dict:
        if not isinstance(value, Mapping):
            raise TraceEncodeError(f"expected mapping, got {_type_name(value)}", path)
        key_hint, item_hint = get_args(hint)
        wire_keys = {key: _encode_key(key, key_hint, path) for key in value}
        encoded = {}
        for key in sorted(wire_keys):
            wire_key = wire_keys[key]
            encoded[wire_key] = _encode_value(value[key], item_hint, f"{path}.{wire_key}", profile)
        return encoded

    if isinstance(hint, type) and issubclass(hint, Proposal):
        if not isinstance(value, Proposal):
            raise TraceEncodeError(f"expected proposal, got {_type_name(value)}", path)
        return _encode_variant(value, PROPOSAL_TYPES, "proposal", path, profile)

    if hint is bool:
        if not isinstance(value, bool):
            raise TraceEncodeError(f"expected boolean, got {_type_name(value)}", path)
        return value

    if hint is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TraceEncodeError(f"expected integer, got {_type_name(value)}", path)
        if value < 0:
            raise TraceEncodeError(f"must be >= 0, got {value}", path)
        return value

    if hint is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TraceEncodeError(f"expected number, got {_type_name(value)}", path)
        if isinstance(value, float) and not math.isfinite(value):
            raise TraceEncodeError(f"must be finite, got {value}", path)
        return value

    if hint is str:
        if not isinstance(value, str):
            raise TraceEncodeError(f"expected string, got {_type_name(value)}", path)
        return value

    if is_dataclass(hint):
        if not isinstance(value, hint):
            raise TraceEncodeError(f"expected {hint.__name__}, got {_type_name(value)}", path)
        return _encode_fields(value, hint, None, path, profile)

    raise TraceEncodeError(f"unsupported field type {hint!r}", path)


def _encode_fields(
    obj: Any,
    cls: type,
    scope: Optional[str],
    path: str,
    profile: SchemaProfile,
    skip_unspecified: bool = False,
) -> Dict[str, Any]:
    hints = _field_hints(cls)
    encoded: Dict[str, Any] = {}
    for f in fields(cls):
        if scope is not None and profile.omits(scope, f.name):
            continue
        value = getattr(obj, f.name)
        if skip_unspecified and value is None:
            continue
        key = wire_name(f)
        encoded[key] = _encode_value(value, hints[f.name], f"{path}.{key}", profile)
    return encoded


def _encode_variant(
    value: Any,
    table: Mapping[str, type],
    kind: str,
    path: str,
    profile: SchemaProfile,
) -> Dict[str, Any]:
    cls = type(value)
    tag = getattr(cls, "TYPE", None)
    if tag is None or table.get(tag) is not cls:
        raise TraceEncodeError(f"unknown {kind} variant: {cls.__name__}", path)
    encoded = {TYPE_KEY: tag}
    encoded.update(_encode_fields(value, cls, tag, path, profile))
    return encoded


def encode_proposal(proposal: Proposal, profile: SchemaProfile = CURRENT) -> Dict[str, Any]:
    """Encode a proposal with its discriminator."""
    return _encode_variant(proposal, PROPOSAL_TYPES, "proposal", "proposal", profile)


def encode_action(action: Action, profile: SchemaProfile = CURRENT, path: str = "action") -> Dict[str, Any]:
    """Encode an action with its discriminator."""
    return _encode_variant(action, ACTION_TYPES, "action", path, profile)


def encode_chain_state(
    chain_state: ChainState,
    profile: SchemaProfile = CURRENT,
    path: str = "chain_state",
) -> Dict[str, Any]:
    """Encode a partial chain state, leaving out every unspecified field."""
    if not isinstance(chain_state, ChainState):
        raise TraceEncodeError(f"expected ChainState, got {_type_name(chain_state)}", path)
    return _encode_fields(chain_state, ChainState, CHAIN_STATE, path, profile, skip_unspecified=True)


def encode_step(step: Step, profile: SchemaProfile = CURRENT, path: str = "step") -> Dict[str, Any]:
    """Encode one step."""
    if not isinstance(step, Step):
        raise TraceEncodeError(f"expected Step, got {_type_name(step)}", path)
    if not isinstance(step.state, Mapping):
        raise TraceEncodeError(f"expected mapping, got {_type_name(step.state)}", f"{path}.{STATE_KEY}")
    for chain in step.state:
        _encode_key(chain, str, f"{path}.{STATE_KEY}")
    state = {}
    for chain_key in sorted(step.state):
        state[chain_key] = encode_chain_state(
            step.state[chain_key], profile, f"{path}.{STATE_KEY}.{chain_key}"
        )
    return {
        ACTION_KEY: encode_action(step.action, profile, f"{path}.{ACTION_KEY}"),
        STATE_KEY: state,
    }


def encode_trace(trace: Union[Trace, List[Step]], profile: SchemaProfile = CURRENT) -> List[Dict[str, Any]]:
    """Encode a trace as the ordered list of its steps."""
    steps = trace.steps if isinstance(trace, Trace) else trace
    encoded = [encode_step(step, profile, f"steps[{i}]") for i, step in enumerate(steps)]
    logger.debug("Encoded trace with %d steps (profile=%s)", len(encoded), profile.name)
    return encoded


# =============================================================================
# Decoding
# =============================================================================

def _expect_mapping(data: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TraceDecodeError(f"expected object, got {_type_name(data)}", path)
    for key in data:
        if not isinstance(key, str):
            raise TraceDecodeError(f"object keys must be strings, got {_type_name(key)}", path)
    return data


def _check_unknown(data: Mapping[str, Any], known: Any, path: str, profile: SchemaProfile) -> None:
    unknown = sorted(key for key in data if key not in known)
    if not unknown:
        return
    if profile.strict:
        raise TraceDecodeError(f"unexpected fields: {unknown}", path)
    logger.warning("Ignoring unknown fields at %s: %s", path or "<root>", unknown)


def _decode_key(key: Any, hint: Any, path: str) -> Any:
    hint = _resolve(hint)
    if hint is int:
        if isinstance(key, int) and not isinstance(key, bool) and key >= 0:
            value = key
        elif isinstance(key, str) and key.isascii() and key.isdigit() and str(int(key)) == key:
            value = int(key)
        else:
            # decimal digits only, no sign and no leading zeros
            raise TraceDecodeError(f"expected integer key, got {key!r}", path)
        return value
    if not isinstance(key, str):
        raise TraceDecodeError(f"expected string key, got {key!r}", path)
    return key


def _decode_value(data: Any, hint: Any, path: str, profile: SchemaProfile) -> Any:
    hint = _resolve(hint)
    origin = get_origin(hint)

    if origin is Union:
        if data is None:
            raise TraceDecodeError("null is not a value; leave the field out instead", path)
        return _decode_value(data, _non_none_arg(hint), path, profile)

    if origin is list:
        if not isinstance(data, list):
            raise TraceDecodeError(f"expected list, got {_type_name(data)}", path)
        (item_hint,) = get_args(hint)
        return [
            _decode_value(item, item_hint, f"{path}[{i}]", profile)
            for i, item in enumerate(data)
        ]

    if origin is dict:
        if not isinstance(data, Mapping):
            raise TraceDecodeError(f"expected object, got {_type_name(data)}", path)
        key_hint, item_hint = get_args(hint)
        decoded = {}
        for key, item in data.items():
            decoded_key = _decode_key(key, key_hint, path)
            if decoded_key in decoded:
                raise TraceDecodeError(f"duplicate key {key!r}", path)
            decoded[decoded_key] = _decode_value(item, item_hint, f"{path}.{key}", profile)
        return decoded

    if isinstance(hint, type) and issubclass(hint, Proposal):
        return _decode_variant(data, PROPOSAL_TYPES, "proposal", path, profile)

    if hint is bool:
        if not isinstance(data, bool):
            raise TraceDecodeError(f"expected boolean, got {_type_name(data)}", path)
        return data

    if hint is int:
        if isinstance(data, bool) or not isinstance(data, int):
            raise TraceDecodeError(f"expected integer, got {_type_name(data)}", path)
        if data < 0:
            raise TraceDecodeError(f"must be >= 0, got {data}", path)
        return data

    if hint is float:
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            raise TraceDecodeError(f"expected number, got {_type_name(data)}", path)
        if isinstance(data, float) and not math.isfinite(data):
            raise TraceDecodeError(f"must be finite, got {data}", path)
        return float(data)

    if hint is str:
        if not isinstance(data, str):
            raise TraceDecodeError(f"expected string, got {_type_name(data)}", path)
        return data

    if is_dataclass(hint):
        return _decode_fields(data, hint, None, path, profile)

    raise TraceDecodeError(f"unsupported field type {hint!r}", path)


def _decode_fields(
    data: Any,
    cls: Type[T],
    scope: Optional[str],
    path: str,
    profile: SchemaProfile,
    all_optional: bool = False,
    reserved: Any = (),
) -> T:
    data = _expect_mapping(data, path)
    hints = _field_hints(cls)
    known: Dict[str, Field] = {wire_name(f): f for f in fields(cls)}
    _check_unknown(data, set(known) | set(reserved), path, profile)

    kwargs = {}
    for key, f in known.items():
        if key not in data:
            if all_optional or is_optional(f) or (scope is not None and profile.omits(scope, f.name)):
                continue
            raise TraceDecodeError(f"missing required field '{key}'", path)
        kwargs[f.name] = _decode_value(data[key], hints[f.name], f"{path}.{key}", profile)
    return cls(**kwargs)


def _decode_variant(
    data: Any,
    table: Mapping[str, type],
    kind: str,
    path: str,
    profile: SchemaProfile,
) -> Any:
    data = _expect_mapping(data, path)
    if TYPE_KEY not in data:
        raise TraceDecodeError(f"missing {kind} discriminator '{TYPE_KEY}'", path)
    tag = data[TYPE_KEY]
    cls = table.get(tag) if isinstance(tag, str) else None
    if cls is None:
        raise TraceDecodeError(f"unknown {kind} type: {tag!r}", path)
    return _decode_fields(data, cls, tag, path, profile, reserved=(TYPE_KEY,))


def decode_proposal(data: Any, profile: SchemaProfile = CURRENT, path: str = "proposal") -> Proposal:
    """Decode a proposal, dispatching on its discriminator."""
    return _decode_variant(data, PROPOSAL_TYPES, "proposal", path, profile)


def decode_action(data: Any, profile: SchemaProfile = CURRENT, path: str = "action") -> Action:
    """Decode an action, dispatching on its discriminator."""
    return _decode_variant(data, ACTION_TYPES, "action", path, profile)


def decode_chain_state(data: Any, profile: SchemaProfile = CURRENT, path: str = "chain_state") -> ChainState:
    """Decode a partial chain state; absent fields stay unspecified."""
    return _decode_fields(data, ChainState, CHAIN_STATE, path, profile, all_optional=True)


def decode_step(data: Any, profile: SchemaProfile = CURRENT, path: str = "step") -> Step:
    """Decode one step."""
    data = _expect_mapping(data, path)
    _check_unknown(data, (ACTION_KEY, STATE_KEY), path, profile)
    for key in (ACTION_KEY, STATE_KEY):
        if key not in data:
            raise TraceDecodeError(f"missing required field '{key}'", path)

    action = decode_action(data[ACTION_KEY], profile, f"{path}.{ACTION_KEY}")
    state_path = f"{path}.{STATE_KEY}"
    raw_state = _expect_mapping(data[STATE_KEY], state_path)
    state: State = {
        chain: decode_chain_state(chain_data, profile, f"{state_path}.{chain}")
        for chain, chain_data in raw_state.items()
    }
    return Step(action=action, state=state)


def decode_trace(data: Any, profile: SchemaProfile = CURRENT) -> Trace:
    """Decode a trace document (the list of its steps)."""
    if not isinstance(data, list):
        raise TraceDecodeError(f"trace document must be a list of steps, got {_type_name(data)}")
    steps = [decode_step(item, profile, f"steps[{i}]") for i, item in enumerate(data)]
    logger.debug("Decoded trace with %d steps (profile=%s)", len(steps), profile.name)
    return Trace(steps)
