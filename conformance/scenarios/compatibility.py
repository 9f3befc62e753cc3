"""
Compatibility steps.

A reduced set of steps suited to sanity checks across protocol versions:
start the provider, then add, key-assign, vote in and connect each consumer.
Facets that older providers cannot report (proposed consumer chains) are
left unspecified.
"""

from typing import List

from ..chain.types import (
    ERR_CONSUMER_KEY_IN_USE,
    ChainID,
    Height,
    ProposalStatus,
    StartChainValidator,
    ValidatorID,
)
from ..traces.actions import (
    AddIbcChannelAction,
    AddIbcConnectionAction,
    AssignConsumerPubKeyAction,
    StartChainAction,
    StartConsumerChainAction,
    SubmitConsumerAdditionProposalAction,
    TransferChannelCompleteAction,
    VoteGovProposalAction,
)
from ..traces.proposals import ConsumerAdditionProposal
from ..traces.schema import ChainState, Step
from .validators import DEFAULT_VALIDATORS, ValidatorConfigs

PROVIDER = ChainID("provi")

ALICE = ValidatorID("alice")
BOB = ValidatorID("bob")
CAROL = ValidatorID("carol")

STAKE = 500000000
ALLOCATION = 10000000000
DEPOSIT = 10000001


def _genesis_validators() -> List[StartChainValidator]:
    return [
        StartChainValidator(id=BOB, stake=STAKE, allocation=ALLOCATION),
        StartChainValidator(id=ALICE, stake=STAKE, allocation=ALLOCATION),
        StartChainValidator(id=CAROL, stake=STAKE, allocation=ALLOCATION),
    ]


def compstep_start_provider_chain() -> List[Step]:
    return [
        Step(
            action=StartChainAction(chain=PROVIDER, validators=_genesis_validators()),
            state={
                PROVIDER: ChainState(
                    val_balances={
                        ALICE: ALLOCATION - STAKE,
                        BOB: ALLOCATION - STAKE,
                        CAROL: ALLOCATION - STAKE,
                    },
                ),
            },
        ),
    ]


def compsteps_start_consumer_chain(
    consumer_name: str,
    proposal_index: int,
    chain_index: int,
    setup_transfer_chans: bool,
    validators: ValidatorConfigs = DEFAULT_VALIDATORS,
) -> List[Step]:
    """
    Steps that launch one consumer chain against a running provider.

    Args:
        consumer_name: Chain id of the new consumer
        proposal_index: Index the consumer-addition proposal will get
        chain_index: IBC client index of the consumer on the provider
        setup_transfer_chans: Also open the ics20 transfer channel
        validators: Key material of alice, bob and carol
    """
    consumer = ChainID(consumer_name)
    carol = validators[CAROL]

    def addition_proposal(status: ProposalStatus) -> ConsumerAdditionProposal:
        return ConsumerAdditionProposal(
            deposit=DEPOSIT,
            chain=consumer,
            spawn_time=0,
            initial_height=Height(revision_number=0, revision_height=1),
            status=status.value,
        )

    steps = [
        Step(
            action=SubmitConsumerAdditionProposalAction(
                chain=PROVIDER,
                sender=ALICE,
                deposit=DEPOSIT,
                consumer_chain=consumer,
                spawn_time=0,
                initial_height=Height(revision_number=0, revision_height=1),
                top_n=100,
            ),
            state={
                PROVIDER: ChainState(
                    val_balances={
                        ALICE: ALLOCATION - STAKE - DEPOSIT,
                        BOB: ALLOCATION - STAKE,
                    },
                    proposals={proposal_index: addition_proposal(ProposalStatus.VOTING_PERIOD)},
                ),
            },
        ),
        # assigned before the consumer starts, so the key lands in the
        # consumer genesis and the node needs no reconfiguration
        Step(
            action=AssignConsumerPubKeyAction(
                chain=consumer,
                validator=CAROL,
                consumer_pubkey=carol.consumer_val_pub_key,
                reconfigure_node=False,
            ),
            state={
                consumer: ChainState(
                    assigned_keys={CAROL: carol.consumer_valcons_address_on_provider},
                    provider_keys={CAROL: carol.valcons_address},
                ),
            },
        ),
        # same key as carol: must be rejected
        Step(
            action=AssignConsumerPubKeyAction(
                chain=consumer,
                validator=BOB,
                consumer_pubkey=carol.consumer_val_pub_key,
                reconfigure_node=False,
                expect_error=True,
                expected_error=ERR_CONSUMER_KEY_IN_USE,
            ),
            state={
                consumer: ChainState(
                    assigned_keys={
                        CAROL: carol.consumer_valcons_address_on_provider,
                        BOB: "",
                    },
                    provider_keys={CAROL: carol.valcons_address},
                ),
            },
        ),
        Step(
            action=VoteGovProposalAction(
                chain=PROVIDER,
                voters=[ALICE, BOB, CAROL],
                vote=["yes", "yes", "yes"],
                prop_number=proposal_index,
            ),
            state={
                PROVIDER: ChainState(
                    proposals={proposal_index: addition_proposal(ProposalStatus.PASSED)},
                    # deposit is refunded once the proposal passes
                    val_balances={
                        ALICE: ALLOCATION - STAKE,
                        BOB: ALLOCATION - STAKE,
                    },
                ),
            },
        ),
        Step(
            action=StartConsumerChainAction(
                consumer_chain=consumer,
                provider_chain=PROVIDER,
                validators=_genesis_validators(),
            ),
            state={
                PROVIDER: ChainState(
                    val_balances={
                        ALICE: ALLOCATION - STAKE,
                        BOB: ALLOCATION - STAKE,
                        CAROL: ALLOCATION - STAKE,
                    },
                ),
                consumer: ChainState(
                    val_balances={
                        ALICE: ALLOCATION,
                        BOB: ALLOCATION,
                        CAROL: ALLOCATION,
                    },
                ),
            },
        ),
        Step(
            action=AddIbcConnectionAction(
                chain_a=consumer,
                chain_b=PROVIDER,
                client_a=0,
                client_b=chain_index,
            ),
            state={},
        ),
        Step(
            action=AddIbcChannelAction(
                chain_a=consumer,
                chain_b=PROVIDER,
                connection_a=0,
                port_a="consumer",
                port_b="provider",
                order="ordered",
            ),
            state={},
        ),
    ]

    if setup_transfer_chans:
        steps.append(Step(
            action=TransferChannelCompleteAction(
                chain_a=consumer,
                chain_b=PROVIDER,
                connection_a=0,
                port_a="transfer",
                port_b="transfer",
                order="unordered",
                channel_a=1,
                channel_b=1,
            ),
            state={},
        ))
    return steps


def compsteps_start_chains(
    consumer_names: List[str],
    setup_transfer_chans: bool,
    validators: ValidatorConfigs = DEFAULT_VALIDATORS,
) -> List[Step]:
    """Start the provider and then each consumer in ``consumer_names``."""
    steps = compstep_start_provider_chain()
    for i, consumer_name in enumerate(consumer_names):
        steps += compsteps_start_consumer_chain(
            consumer_name,
            proposal_index=i + 1,
            chain_index=i,
            setup_transfer_chans=setup_transfer_chans,
            validators=validators,
        )
    return steps
