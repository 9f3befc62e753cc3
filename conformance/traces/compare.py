"""
Trace comparison.

Produces structured differences between traces, and between an expected
partial chain state and the state actually observed on a chain.
"""

from dataclasses import dataclass, fields, is_dataclass
from typing import Any, List, Mapping, Optional, Union

from .errors import TraceMismatchError
from .parser import read_trace_from_file
from .profiles import CURRENT, SchemaProfile
from .schema import ChainState, State, Step, Trace
from .writer import write_trace_to_file

_MISSING = object()


@dataclass(frozen=True)
class Difference:
    """A single mismatch between an expected and an actual value."""
    path: str
    expected: Any
    actual: Any

    def __str__(self) -> str:
        expected = "<missing>" if self.expected is _MISSING else repr(self.expected)
        actual = "<missing>" if self.actual is _MISSING else repr(self.actual)
        return f"{self.path}: expected {expected}, got {actual}"


def diff_values(expected: Any, actual: Any, path: str = "") -> List[Difference]:
    """
    Structurally compare two trace values.

    Dataclasses must be of the same class (so a different action or proposal
    kind is one difference at that path), mappings are compared key by key
    and lists position by position.
    """
    if is_dataclass(expected) and not isinstance(expected, type):
        if type(expected) is not type(actual):
            return [Difference(path, expected, actual)]
        diffs = []
        for f in fields(expected):
            diffs.extend(diff_values(
                getattr(expected, f.name),
                getattr(actual, f.name),
                f"{path}.{f.name}" if path else f.name,
            ))
        return diffs

    if isinstance(expected, Mapping) and isinstance(actual, Mapping):
        diffs = []
        for key in expected:
            sub_path = f"{path}[{key!r}]"
            if key not in actual:
                diffs.append(Difference(sub_path, expected[key], _MISSING))
            else:
                diffs.extend(diff_values(expected[key], actual[key], sub_path))
        for key in actual:
            if key not in expected:
                diffs.append(Difference(f"{path}[{key!r}]", _MISSING, actual[key]))
        return diffs

    if isinstance(expected, (list, tuple)) and isinstance(actual, (list, tuple)):
        diffs = []
        for i in range(max(len(expected), len(actual))):
            sub_path = f"{path}[{i}]"
            if i >= len(actual):
                diffs.append(Difference(sub_path, expected[i], _MISSING))
            elif i >= len(expected):
                diffs.append(Difference(sub_path, _MISSING, actual[i]))
            else:
                diffs.extend(diff_values(expected[i], actual[i], sub_path))
        return diffs

    if isinstance(expected, bool) or isinstance(actual, bool):
        mismatch = type(expected) is not type(actual) or expected != actual
    else:
        mismatch = expected != actual
    return [Difference(path, expected, actual)] if mismatch else []


def _steps(trace: Union[Trace, List[Step]]) -> List[Step]:
    return trace.steps if isinstance(trace, Trace) else list(trace)


def diff_traces(expected: Union[Trace, List[Step]], actual: Union[Trace, List[Step]]) -> List[Difference]:
    """Compare two traces step by step."""
    return diff_values(_steps(expected), _steps(actual), "steps")


def assert_traces_equal(expected: Union[Trace, List[Step]], actual: Union[Trace, List[Step]]) -> None:
    """Raise TraceMismatchError if the traces differ in any field."""
    diffs = diff_traces(expected, actual)
    if diffs:
        raise TraceMismatchError(diffs)


def diff_chain_state(expected: ChainState, actual: ChainState, path: str = "") -> List[Difference]:
    """
    Compare observed chain state against an expected partial state.

    Only fields specified in ``expected`` are checked. Inside a specified
    field the comparison is exact, so an expected empty mapping fails
    against a non-empty one.
    """
    diffs = []
    for name in expected.specified_fields():
        sub_path = f"{path}.{name}" if path else name
        diffs.extend(diff_values(getattr(expected, name), getattr(actual, name), sub_path))
    return diffs


def diff_state(expected: State, actual: State) -> List[Difference]:
    """Compare the chains asserted in ``expected`` against observed state."""
    diffs = []
    for chain, chain_state in expected.items():
        observed: Optional[ChainState] = actual.get(chain)
        if observed is None:
            diffs.append(Difference(chain, chain_state, _MISSING))
            continue
        diffs.extend(diff_chain_state(chain_state, observed, chain))
    return diffs


def round_trip(
    trace: Union[Trace, List[Step]],
    file_path: str,
    profile: SchemaProfile = CURRENT,
) -> Trace:
    """Write a trace, read it back, and raise if anything changed."""
    write_trace_to_file(file_path, trace, profile)
    got = read_trace_from_file(file_path, profile)
    assert_traces_equal(trace, got)
    return got


def format_differences(diffs: List[Difference]) -> str:
    """Format differences for display."""
    lines = ["Differences (expected vs. actual):"]
    lines.append("-" * 50)
    for diff in diffs:
        lines.append(str(diff))
    lines.append("-" * 50)
    lines.append(f"Total: {len(diffs)} difference{'s' if len(diffs) != 1 else ''}")
    return "\n".join(lines)
