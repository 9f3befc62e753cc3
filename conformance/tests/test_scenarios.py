"""
Scenario Tests

Tests for the canonical scenarios and the compatibility step groups.
"""

import os

import pytest

from conformance.chain.types import ERR_CONSUMER_KEY_IN_USE, ChainID, ProposalStatus, ValidatorID
from conformance.scenarios import (
    DEFAULT_VALIDATORS,
    PROVIDER,
    SCENARIOS,
    ValidatorConfig,
    compstep_start_provider_chain,
    compsteps_start_chains,
    compsteps_start_consumer_chain,
)
from conformance.traces import (
    COMPATIBILITY,
    AssignConsumerPubKeyAction,
    StartChainAction,
    SubmitConsumerAdditionProposalAction,
    Trace,
    TransferChannelCompleteAction,
    VoteGovProposalAction,
    read_trace_from_file,
    round_trip,
    write_trace_to_file,
)

ALICE = ValidatorID("alice")
BOB = ValidatorID("bob")
CAROL = ValidatorID("carol")
CONSU = ChainID("consu")


# =============================================================================
# Step Group Tests
# =============================================================================

class TestStartChains:
    def test_provider_start(self):
        (step,) = compstep_start_provider_chain()
        assert isinstance(step.action, StartChainAction)
        assert step.action.chain == PROVIDER
        assert [v.id for v in step.action.validators] == [BOB, ALICE, CAROL]
        assert step.state[PROVIDER].val_balances == {
            ALICE: 9500000000, BOB: 9500000000, CAROL: 9500000000,
        }

    @pytest.mark.parametrize("names,transfer,expected", [
        (["consu"], False, 8),
        (["democ"], True, 9),
        (["consu", "densu"], False, 15),
    ])
    def test_step_counts(self, names, transfer, expected):
        assert len(compsteps_start_chains(names, transfer)) == expected

    def test_transfer_channel_is_last(self):
        steps = compsteps_start_chains(["democ"], True)
        assert isinstance(steps[-1].action, TransferChannelCompleteAction)
        assert steps[-1].action.chain_a == "democ"

    def test_proposal_indices_follow_consumer_order(self):
        steps = compsteps_start_chains(["consu", "densu"], False)
        submits = [s for s in steps if isinstance(s.action, SubmitConsumerAdditionProposalAction)]
        votes = [s.action for s in steps if isinstance(s.action, VoteGovProposalAction)]
        assert [list(s.state[PROVIDER].proposals) for s in submits] == [[1], [2]]
        assert [v.prop_number for v in votes] == [1, 2]


class TestConsumerLaunch:
    @pytest.fixture
    def steps(self):
        return compsteps_start_consumer_chain("consu", 1, 0, False)

    def test_proposal_status_progression(self, steps):
        assert steps[0].state[PROVIDER].proposals[1].status == ProposalStatus.VOTING_PERIOD.value
        assert steps[3].state[PROVIDER].proposals[1].status == ProposalStatus.PASSED.value

    def test_deposit_deducted_from_submitter_only(self, steps):
        balances = steps[0].state[PROVIDER].val_balances
        assert balances[ALICE] == 9500000000 - 10000001
        assert balances[BOB] == 9500000000

    def test_deposit_refunded_after_vote(self, steps):
        assert steps[3].state[PROVIDER].val_balances[ALICE] == 9500000000

    def test_duplicate_key_assignment_expected_to_fail(self, steps):
        carol_step, bob_step = steps[1], steps[2]
        assert not carol_step.action.expect_error
        assert bob_step.action.expect_error
        assert bob_step.action.expected_error == ERR_CONSUMER_KEY_IN_USE
        assert bob_step.action.consumer_pubkey == carol_step.action.consumer_pubkey

        keys = bob_step.state[CONSU].assigned_keys
        assert keys[BOB] == ""
        assert keys[CAROL] == DEFAULT_VALIDATORS[CAROL].consumer_valcons_address_on_provider

    def test_unrelated_facets_left_unspecified(self, steps):
        assert steps[0].state[PROVIDER].proposed_consumer_chains is None
        assert steps[5].state == {}

    def test_custom_validators(self):
        custom = dict(DEFAULT_VALIDATORS)
        custom[CAROL] = ValidatorConfig(
            ip_suffix="9",
            valcons_address="cosmosvalcons1custom",
            consumer_val_pub_key="custom-key",
            consumer_valcons_address="consumervalcons1custom",
            consumer_valcons_address_on_provider="cosmosvalcons1customprov",
        )
        steps = compsteps_start_consumer_chain("consu", 1, 0, False, validators=custom)
        action = steps[1].action
        assert isinstance(action, AssignConsumerPubKeyAction)
        assert action.consumer_pubkey == "custom-key"
        assert steps[1].state[CONSU].assigned_keys == {CAROL: "cosmosvalcons1customprov"}
        # the shared defaults are untouched
        assert DEFAULT_VALIDATORS[CAROL].consumer_val_pub_key != "custom-key"

    def test_default_validators_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_VALIDATORS[CAROL] = DEFAULT_VALIDATORS[ALICE]


# =============================================================================
# Canonical Scenario Tests
# =============================================================================

class TestScenarios:
    @pytest.mark.parametrize("name", sorted(SCENARIOS))
    def test_round_trip(self, tmp_path, name):
        trace = SCENARIOS[name]()
        assert isinstance(trace, Trace)
        assert round_trip(trace, str(tmp_path / f"{name}.json")) == trace

    @pytest.mark.parametrize("name", sorted(SCENARIOS))
    def test_round_trip_compatibility_yaml(self, tmp_path, name):
        trace = SCENARIOS[name]()
        assert round_trip(trace, str(tmp_path / f"{name}.yaml"), COMPATIBILITY) == trace

    def test_compatibility_statuses_after_reading(self, tmp_path):
        path = str(tmp_path / "compatibility.json")
        write_trace_to_file(path, SCENARIOS["compatibility"]())
        got = read_trace_from_file(path)
        assert got[1].state[PROVIDER].proposals[1].status == ProposalStatus.VOTING_PERIOD.value
        assert got[4].state[PROVIDER].proposals[1].status == ProposalStatus.PASSED.value
        assert got[3].action.expect_error

    def test_builders_return_fresh_traces(self):
        first = SCENARIOS["proposal-in-state"]()
        second = SCENARIOS["proposal-in-state"]()
        assert first == second
        assert first is not second

    def test_written_files_use_requested_extension(self, tmp_path):
        path = str(tmp_path / "proposal-submission.yaml")
        write_trace_to_file(path, SCENARIOS["proposal-submission"]())
        with open(path) as f:
            assert f.read().startswith("- action:")
        assert os.path.getsize(path) > 0
