"""
Sample trace values for the tests.

One populated instance of every action and proposal kind, so the
codec tests can check that the variant tables are covered in full.
"""

from conformance.chain.types import (
    ChainID,
    Height,
    IBCTransferParams,
    ProposalStatus,
    Rewards,
    StartChainValidator,
    ValidatorID,
)
from conformance.traces import (
    AddChainToRelayerAction,
    AddIbcChannelAction,
    AddIbcConnectionAction,
    AssignConsumerPubKeyAction,
    ChainState,
    ChangeRewardDenomsProposal,
    ConsumerAdditionProposal,
    ConsumerModificationProposal,
    ConsumerRemovalProposal,
    DelegateTokensAction,
    DoublesignSlashAction,
    DowntimeSlashAction,
    IBCTransferParamsProposal,
    OptInAction,
    OptOutAction,
    ParamsProposal,
    RedelegateTokensAction,
    RelayPacketsAction,
    SendTokensAction,
    StartChainAction,
    StartConsumerChainAction,
    StartRelayerAction,
    SubmitChangeRewardDenomsProposalAction,
    SubmitConsumerAdditionProposalAction,
    SubmitConsumerModificationProposalAction,
    SubmitConsumerRemovalProposalAction,
    SubmitEnableTransfersProposalAction,
    SubmitParamChangeLegacyProposalAction,
    SubmitTextProposalAction,
    TextProposal,
    TransferChannelCompleteAction,
    UnbondTokensAction,
    UnjailValidatorAction,
    UpgradeProposal,
    VoteGovProposalAction,
    WaitTimeAction,
)

PROVI = ChainID("provi")
CONSU = ChainID("consu")
ALICE = ValidatorID("alice")
BOB = ValidatorID("bob")
CAROL = ValidatorID("carol")

VOTING = ProposalStatus.VOTING_PERIOD.value
PASSED = ProposalStatus.PASSED.value


def make_proposals():
    return [
        TextProposal(deposit=10000001, status=VOTING, title="Proposal 1", description="Description 1"),
        ConsumerAdditionProposal(
            deposit=10000001,
            status=VOTING,
            chain=CONSU,
            spawn_time=0,
            initial_height=Height(revision_number=5, revision_height=5),
            top_n=95,
        ),
        ConsumerRemovalProposal(deposit=10000001, status=PASSED, chain=ChainID("test123"), stop_time=10),
        ConsumerModificationProposal(deposit=10000001, status=VOTING, chain=CONSU, top_n=50),
        IBCTransferParamsProposal(
            deposit=10000001,
            status=VOTING,
            title="Enable transfers",
            params=IBCTransferParams(send_enabled=True, receive_enabled=True),
        ),
        ParamsProposal(deposit=10000001, status=PASSED, subspace="staking", key="MaxValidators", value="105"),
        UpgradeProposal(
            deposit=10000001,
            status=VOTING,
            title="sovereign-changeover",
            description="changeover to consumer",
            upgrade_height=110,
            upgrade_type="/cosmos.upgrade.v1beta1.MsgSoftwareUpgrade",
        ),
        ChangeRewardDenomsProposal(
            deposit=10000001,
            status=VOTING,
            denoms_to_add=["ibc/3C3D7B3BE4ECC85A0E5B52A3AEC3B7DFC2AA9CA47C37821E57020D6807043BE9"],
            denoms_to_remove=["stake"],
        ),
    ]


def make_actions():
    validators = [
        StartChainValidator(id=BOB, stake=500000000, allocation=10000000000),
        StartChainValidator(id=ALICE, stake=500000000, allocation=10000000000),
    ]
    return [
        StartChainAction(
            chain=PROVI,
            validators=validators,
            genesis_changes=".app_state.gov.params.voting_period = \"5s\"",
            is_consumer=False,
        ),
        StartConsumerChainAction(consumer_chain=CONSU, provider_chain=PROVI, validators=validators),
        SendTokensAction(chain=PROVI, sender=ALICE, recipient=BOB, amount=2),
        SubmitTextProposalAction(chain=PROVI, sender=BOB, deposit=10000001, title="t", description="d"),
        SubmitConsumerAdditionProposalAction(
            pre_ccv=True,
            chain=PROVI,
            sender=ALICE,
            deposit=10000001,
            consumer_chain=CONSU,
            spawn_time=0,
            initial_height=Height(revision_number=0, revision_height=1),
            top_n=100,
            validators_power_cap=30,
            validator_set_cap=4,
            allowlist=["cosmosvalcons1qmq08eruchr5sf5s3rwz7djpr5a25f7xw4mceq"],
            denylist=[],
        ),
        SubmitConsumerRemovalProposalAction(
            chain=PROVI, sender=BOB, deposit=10000001, consumer_chain=CONSU, stop_time_offset=0,
        ),
        SubmitConsumerModificationProposalAction(
            chain=PROVI,
            sender=ALICE,
            deposit=10000001,
            consumer_chain=CONSU,
            top_n=0,
            expect_error=True,
            expected_error="chain is not in the launched phase",
        ),
        SubmitParamChangeLegacyProposalAction(
            chain=PROVI, sender=ALICE, deposit=10000001, subspace="staking", key="MaxValidators", value="105",
        ),
        SubmitEnableTransfersProposalAction(chain=PROVI, sender=ALICE, title="Enable IBC Send", deposit=10000001),
        SubmitChangeRewardDenomsProposalAction(
            chain=PROVI, sender=BOB, deposit=10000001, denoms_to_add=["ibc/denom"], denoms_to_remove=["stake"],
        ),
        VoteGovProposalAction(chain=PROVI, voters=[ALICE, BOB, CAROL], vote=["yes", "no", "abstain"], prop_number=1),
        AssignConsumerPubKeyAction(
            chain=CONSU, validator=CAROL, consumer_pubkey='{"@type":"/cosmos.crypto.ed25519.PubKey"}',
            reconfigure_node=True,
        ),
        OptInAction(chain=CONSU, validator=ALICE),
        OptOutAction(chain=CONSU, validator=BOB, expect_error=True, expected_error="cannot opt out"),
        AddChainToRelayerAction(chain=CONSU, validator=ALICE, is_consumer=True),
        AddIbcConnectionAction(chain_a=CONSU, chain_b=PROVI, client_a=0, client_b=1),
        AddIbcChannelAction(
            chain_a=CONSU, chain_b=PROVI, connection_a=0, port_a="consumer", port_b="provider",
            order="ordered", version="1",
        ),
        TransferChannelCompleteAction(
            chain_a=CONSU, chain_b=PROVI, connection_a=0, port_a="transfer", port_b="transfer",
            order="unordered", channel_a=1, channel_b=1,
        ),
        RelayPacketsAction(chain_a=PROVI, chain_b=CONSU, port="provider", channel=0),
        StartRelayerAction(),
        DelegateTokensAction(chain=PROVI, sender=ALICE, recipient=ALICE, amount=11000000),
        UnbondTokensAction(chain=PROVI, sender=ALICE, unbond_from=ALICE, amount=1000000),
        RedelegateTokensAction(chain=PROVI, src=ALICE, dst=CAROL, tx_sender=ALICE, amount=450000000),
        DowntimeSlashAction(chain=CONSU, validator=BOB),
        DoublesignSlashAction(chain=PROVI, validator=CAROL),
        UnjailValidatorAction(provider=PROVI, validator=BOB),
        WaitTimeAction(wait_seconds=60),
    ]


def make_full_chain_state():
    """A chain state with every field specified."""
    return ChainState(
        val_balances={ALICE: 9489999999, BOB: 9500000000},
        proposed_consumer_chains=["consu"],
        val_powers={ALICE: 509, BOB: 500, CAROL: 495},
        staked_tokens={ALICE: 500000000},
        ibc_transfer_params=IBCTransferParams(send_enabled=True, receive_enabled=False),
        rewards=Rewards(
            is_rewarded={ALICE: True, BOB: False},
            is_incrementing_total_rewards=True,
            is_native_denom=False,
        ),
        consumer_chains={CONSU: True},
        assigned_keys={CAROL: "cosmosvalcons1dxlyn4ngjmf7ymxhm5qdd5p5a4pwdjypah6hxy", BOB: ""},
        provider_keys={CAROL: "cosmosvalcons1ezyrq65s3gshhx5585w6mpusq3xsj3ayzf4uv6"},
        consumer_pending_packet_queue_size=0,
        registered_consumer_reward_denoms=[],
        clients_frozen_heights={"07-tendermint-0": Height(revision_number=0, revision_height=1)},
        has_to_validate={ALICE: [CONSU], BOB: []},
        proposals={
            1: ConsumerAdditionProposal(deposit=10000001, chain=CONSU, status=VOTING),
            2: TextProposal(),
        },
        consumer_commission_rates={ALICE: 0.5, BOB: 0.0},
    )
