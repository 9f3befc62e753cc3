"""
Comparison Tests

Tests for trace diffs and partial chain-state checks.
"""

import pytest

from conformance.traces import (
    ChainState,
    ConsumerRemovalProposal,
    Difference,
    StartRelayerAction,
    Step,
    TextProposal,
    Trace,
    TraceMismatchError,
    WaitTimeAction,
    assert_traces_equal,
    diff_chain_state,
    diff_state,
    diff_traces,
    diff_values,
    format_differences,
)

from .samples import ALICE, BOB, CONSU, PROVI


class TestDiffValues:
    def test_equal_values(self):
        assert diff_values({"a": [1, 2]}, {"a": [1, 2]}) == []

    def test_int_and_float_compare_by_value(self):
        assert diff_values(1, 1.0) == []

    def test_bool_is_not_int(self):
        (diff,) = diff_values(True, 1, "x")
        assert diff.path == "x"

    def test_different_variant_is_one_difference(self):
        expected = TextProposal(title="a")
        actual = ConsumerRemovalProposal(chain=CONSU)
        assert diff_values(expected, actual, "p") == [Difference("p", expected, actual)]

    def test_nested_paths(self):
        expected = ChainState(val_balances={ALICE: 1, BOB: 2})
        actual = ChainState(val_balances={ALICE: 1, BOB: 3})
        (diff,) = diff_values(expected, actual)
        assert diff.path == "val_balances['bob']"
        assert (diff.expected, diff.actual) == (2, 3)

    def test_missing_and_extra_entries(self):
        diffs = diff_values({"a": 1}, {"b": 1}, "m")
        assert [d.path for d in diffs] == ["m['a']", "m['b']"]
        assert "<missing>" in str(diffs[0])
        assert "<missing>" in str(diffs[1])

    def test_list_length_mismatch(self):
        diffs = diff_values([1, 2, 3], [1], "l")
        assert [d.path for d in diffs] == ["l[1]", "l[2]"]


class TestDiffTraces:
    def test_identical_traces(self):
        trace = Trace([Step(StartRelayerAction())])
        assert diff_traces(trace, list(trace.steps)) == []
        assert_traces_equal(trace, trace)

    def test_step_reorder_detected(self):
        a = Step(WaitTimeAction(wait_seconds=1))
        b = Step(WaitTimeAction(wait_seconds=2))
        diffs = diff_traces([a, b], [b, a])
        assert [d.path for d in diffs] == [
            "steps[0].action.wait_seconds",
            "steps[1].action.wait_seconds",
        ]

    def test_assert_raises_with_differences(self):
        with pytest.raises(TraceMismatchError, match="1 difference") as exc:
            assert_traces_equal(
                [Step(StartRelayerAction())],
                [Step(StartRelayerAction(), {PROVI: ChainState()})],
            )
        assert exc.value.differences[0].path == "steps[0].state['provi']"


class TestDiffChainState:
    def test_unspecified_fields_ignored(self):
        expected = ChainState(val_balances={ALICE: 1})
        observed = ChainState(val_balances={ALICE: 1}, val_powers={ALICE: 500})
        assert diff_chain_state(expected, observed) == []

    def test_empty_mapping_checked_exactly(self):
        """An expected empty mapping fails against a populated one."""
        expected = ChainState(assigned_keys={})
        observed = ChainState(assigned_keys={BOB: "cosmosvalcons1x"})
        (diff,) = diff_chain_state(expected, observed)
        assert diff.path == "assigned_keys['bob']"

    def test_unobserved_field(self):
        (diff,) = diff_chain_state(ChainState(staked_tokens={}), ChainState())
        assert diff.path == "staked_tokens"
        assert diff.actual is None

    def test_state_missing_chain(self):
        expected = {PROVI: ChainState(val_powers={}), CONSU: ChainState(val_powers={})}
        diffs = diff_state(expected, {PROVI: ChainState(val_powers={})})
        assert [d.path for d in diffs] == ["consu"]

    def test_state_paths_carry_chain(self):
        expected = {PROVI: ChainState(val_powers={ALICE: 500})}
        observed = {PROVI: ChainState(val_powers={ALICE: 0}), CONSU: ChainState()}
        (diff,) = diff_state(expected, observed)
        assert diff.path == "provi.val_powers['alice']"


def test_format_differences():
    text = format_differences([Difference("a", 1, 2), Difference("b", 3, 4)])
    assert "a: expected 1, got 2" in text
    assert text.endswith("Total: 2 differences")
