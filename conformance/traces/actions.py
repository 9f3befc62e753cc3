"""
Operations a trace applies to the provider and consumer chains.

Each operation kind is a dataclass tagged with a ``TYPE`` discriminator;
``ACTION_TYPES`` is the closed table of kinds the codec knows about.

Some operations are meant to fail. They set ``expect_error`` and give a
fragment of the expected error message in ``expected_error``; see
``check_outcome`` for how an executor should judge them.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional, Type

from ..chain.types import ChainID, Height, StartChainValidator, ValidatorID
from .wire import wire_field


@dataclass(frozen=True)
class Action:
    """Base class of all trace operations."""
    TYPE: ClassVar[str] = ""

    @property
    def expects_error(self) -> bool:
        return bool(getattr(self, "expect_error", False))


def check_outcome(action: Action, error_message: Optional[str]) -> bool:
    """
    Judge the outcome of executing an action.

    Args:
        action: The action that was executed
        error_message: The error reported by the chain, or None on success

    Returns:
        True if the outcome is the one the trace expects
    """
    if not action.expects_error:
        return error_message is None
    if error_message is None:
        return False
    return getattr(action, "expected_error", "") in error_message


# =============================================================================
# Chain Lifecycle
# =============================================================================

@dataclass(frozen=True)
class StartChainAction(Action):
    TYPE: ClassVar[str] = "start_chain"

    chain: ChainID = ChainID("")
    validators: List[StartChainValidator] = field(default_factory=list)
    # jq expression applied to the genesis file
    genesis_changes: str = ""
    is_consumer: bool = False


@dataclass(frozen=True)
class StartConsumerChainAction(Action):
    TYPE: ClassVar[str] = "start_consumer_chain"

    consumer_chain: ChainID = ChainID("")
    provider_chain: ChainID = ChainID("")
    validators: List[StartChainValidator] = field(default_factory=list)
    genesis_changes: str = ""


@dataclass(frozen=True)
class SendTokensAction(Action):
    TYPE: ClassVar[str] = "send_tokens"

    chain: ChainID = ChainID("")
    sender: ValidatorID = wire_field(ValidatorID(""), name="from")
    recipient: ValidatorID = wire_field(ValidatorID(""), name="to")
    amount: int = 0


# =============================================================================
# Governance
# =============================================================================

@dataclass(frozen=True)
class SubmitTextProposalAction(Action):
    TYPE: ClassVar[str] = "submit_text_proposal"

    chain: ChainID = ChainID("")
    sender: ValidatorID = wire_field(ValidatorID(""), name="from")
    deposit: int = 0
    title: str = ""
    description: str = ""


@dataclass(frozen=True)
class SubmitConsumerAdditionProposalAction(Action):
    TYPE: ClassVar[str] = "submit_consumer_addition_proposal"

    # submit the proposal before the provider runs interchain security
    pre_ccv: bool = False
    chain: ChainID = ChainID("")
    sender: ValidatorID = wire_field(ValidatorID(""), name="from")
    deposit: int = 0
    consumer_chain: ChainID = ChainID("")
    spawn_time: int = 0
    initial_height: Height = field(default_factory=Height)
    top_n: int = 0
    validators_power_cap: int = wire_field(0, optional=True)
    validator_set_cap: int = wire_field(0, optional=True)
    allowlist: List[str] = wire_field(default_factory=list, optional=True)
    denylist: List[str] = wire_field(default_factory=list, optional=True)


@dataclass(frozen=True)
class SubmitConsumerRemovalProposalAction(Action):
    TYPE: ClassVar[str] = "submit_consumer_removal_proposal"

    chain: ChainID = ChainID("")
    sender: ValidatorID = wire_field(ValidatorID(""), name="from")
    deposit: int = 0
    consumer_chain: ChainID = ChainID("")
    stop_time_offset: int = 0


@dataclass(frozen=True)
class SubmitConsumerModificationProposalAction(Action):
    TYPE: ClassVar[str] = "submit_consumer_modification_proposal"

    chain: ChainID = ChainID("")
    sender: ValidatorID = wire_field(ValidatorID(""), name="from")
    deposit: int = 0
    consumer_chain: ChainID = ChainID("")
    top_n: int = 0
    expect_error: bool = wire_field(False, optional=True)
    expected_error: str = wire_field("", optional=True)


@dataclass(frozen=True)
class SubmitParamChangeLegacyProposalAction(Action):
    TYPE: ClassVar[str] = "submit_param_change_proposal"

    chain: ChainID = ChainID("")
    sender: ValidatorID = wire_field(ValidatorID(""), name="from")
    deposit: int = 0
    subspace: str = ""
    key: str = ""
    value: str = ""


@dataclass(frozen=True)
class SubmitEnableTransfersProposalAction(Action):
    TYPE: ClassVar[str] = "submit_enable_transfers_proposal"

    chain: ChainID = ChainID("")
    sender: ValidatorID = wire_field(ValidatorID(""), name="from")
    title: str = ""
    deposit: int = 0


@dataclass(frozen=True)
class SubmitChangeRewardDenomsProposalAction(Action):
    TYPE: ClassVar[str] = "submit_change_reward_denoms_proposal"

    chain: ChainID = ChainID("")
    sender: ValidatorID = wire_field(ValidatorID(""), name="from")
    deposit: int = 0
    denoms_to_add: List[str] = field(default_factory=list)
    denoms_to_remove: List[str] = field(default_factory=list)
    expect_error: bool = wire_field(False, optional=True)
    expected_error: str = wire_field("", optional=True)


@dataclass(frozen=True)
class VoteGovProposalAction(Action):
    """One vote per entry of ``voters``, paired by position with ``vote``."""
    TYPE: ClassVar[str] = "vote_gov_proposal"

    chain: ChainID = ChainID("")
    voters: List[ValidatorID] = wire_field(default_factory=list, name="from")
    vote: List[str] = field(default_factory=list)
    prop_number: int = 0


# =============================================================================
# Consumer Keys and Opt-in
# =============================================================================

@dataclass(frozen=True)
class AssignConsumerPubKeyAction(Action):
    TYPE: ClassVar[str] = "assign_consumer_pubkey"

    chain: ChainID = ChainID("")
    validator: ValidatorID = ValidatorID("")
    consumer_pubkey: str = ""
    # restart the validator's consumer node with the new key
    reconfigure_node: bool = False
    expect_error: bool = wire_field(False, optional=True)
    expected_error: str = wire_field("", optional=True)


@dataclass(frozen=True)
class OptInAction(Action):
    TYPE: ClassVar[str] = "opt_in"

    chain: ChainID = ChainID("")
    validator: ValidatorID = ValidatorID("")
    expect_error: bool = wire_field(False, optional=True)
    expected_error: str = wire_field("", optional=True)


@dataclass(frozen=True)
class OptOutAction(Action):
    TYPE: ClassVar[str] = "opt_out"

    chain: ChainID = ChainID("")
    validator: ValidatorID = ValidatorID("")
    expect_error: bool = wire_field(False, optional=True)
    expected_error: str = wire_field("", optional=True)


# =============================================================================
# Relayer and IBC
# =============================================================================

@dataclass(frozen=True)
class AddChainToRelayerAction(Action):
    TYPE: ClassVar[str] = "add_chain_to_relayer"

    chain: ChainID = ChainID("")
    validator: ValidatorID = ValidatorID("")
    is_consumer: bool = False


@dataclass(frozen=True)
class AddIbcConnectionAction(Action):
    TYPE: ClassVar[str] = "add_ibc_connection"

    chain_a: ChainID = ChainID("")
    chain_b: ChainID = ChainID("")
    client_a: int = 0
    client_b: int = 0


@dataclass(frozen=True)
class AddIbcChannelAction(Action):
    TYPE: ClassVar[str] = "add_ibc_channel"

    chain_a: ChainID = ChainID("")
    chain_b: ChainID = ChainID("")
    connection_a: int = 0
    port_a: str = ""
    port_b: str = ""
    # "ordered" or "unordered"
    order: str = ""
    version: str = wire_field("", optional=True)


@dataclass(frozen=True)
class TransferChannelCompleteAction(Action):
    TYPE: ClassVar[str] = "transfer_channel_complete"

    chain_a: ChainID = ChainID("")
    chain_b: ChainID = ChainID("")
    connection_a: int = 0
    port_a: str = ""
    port_b: str = ""
    order: str = ""
    channel_a: int = 0
    channel_b: int = 0


@dataclass(frozen=True)
class RelayPacketsAction(Action):
    TYPE: ClassVar[str] = "relay_packets"

    chain_a: ChainID = ChainID("")
    chain_b: ChainID = ChainID("")
    port: str = ""
    channel: int = 0


@dataclass(frozen=True)
class StartRelayerAction(Action):
    TYPE: ClassVar[str] = "start_relayer"


# =============================================================================
# Staking and Slashing
# =============================================================================

@dataclass(frozen=True)
class DelegateTokensAction(Action):
    TYPE: ClassVar[str] = "delegate_tokens"

    chain: ChainID = ChainID("")
    sender: ValidatorID = wire_field(ValidatorID(""), name="from")
    recipient: ValidatorID = wire_field(ValidatorID(""), name="to")
    amount: int = 0


@dataclass(frozen=True)
class UnbondTokensAction(Action):
    TYPE: ClassVar[str] = "unbond_tokens"

    chain: ChainID = ChainID("")
    sender: ValidatorID = ValidatorID("")
    unbond_from: ValidatorID = ValidatorID("")
    amount: int = 0


@dataclass(frozen=True)
class RedelegateTokensAction(Action):
    TYPE: ClassVar[str] = "redelegate_tokens"

    chain: ChainID = ChainID("")
    src: ValidatorID = ValidatorID("")
    dst: ValidatorID = ValidatorID("")
    tx_sender: ValidatorID = ValidatorID("")
    amount: int = 0


@dataclass(frozen=True)
class DowntimeSlashAction(Action):
    TYPE: ClassVar[str] = "downtime_slash"

    chain: ChainID = ChainID("")
    validator: ValidatorID = ValidatorID("")


@dataclass(frozen=True)
class DoublesignSlashAction(Action):
    TYPE: ClassVar[str] = "doublesign_slash"

    chain: ChainID = ChainID("")
    validator: ValidatorID = ValidatorID("")


@dataclass(frozen=True)
class UnjailValidatorAction(Action):
    TYPE: ClassVar[str] = "unjail_validator"

    provider: ChainID = ChainID("")
    validator: ValidatorID = ValidatorID("")


@dataclass(frozen=True)
class WaitTimeAction(Action):
    TYPE: ClassVar[str] = "wait_time"

    wait_seconds: int = 0


ACTION_TYPES: Dict[str, Type[Action]] = {
    StartChainAction.TYPE: StartChainAction,
    StartConsumerChainAction.TYPE: StartConsumerChainAction,
    SendTokensAction.TYPE: SendTokensAction,
    SubmitTextProposalAction.TYPE: SubmitTextProposalAction,
    SubmitConsumerAdditionProposalAction.TYPE: SubmitConsumerAdditionProposalAction,
    SubmitConsumerRemovalProposalAction.TYPE: SubmitConsumerRemovalProposalAction,
    SubmitConsumerModificationProposalAction.TYPE: SubmitConsumerModificationProposalAction,
    SubmitParamChangeLegacyProposalAction.TYPE: SubmitParamChangeLegacyProposalAction,
    SubmitEnableTransfersProposalAction.TYPE: SubmitEnableTransfersProposalAction,
    SubmitChangeRewardDenomsProposalAction.TYPE: SubmitChangeRewardDenomsProposalAction,
    VoteGovProposalAction.TYPE: VoteGovProposalAction,
    AssignConsumerPubKeyAction.TYPE: AssignConsumerPubKeyAction,
    OptInAction.TYPE: OptInAction,
    OptOutAction.TYPE: OptOutAction,
    AddChainToRelayerAction.TYPE: AddChainToRelayerAction,
    AddIbcConnectionAction.TYPE: AddIbcConnectionAction,
    AddIbcChannelAction.TYPE: AddIbcChannelAction,
    TransferChannelCompleteAction.TYPE: TransferChannelCompleteAction,
    RelayPacketsAction.TYPE: RelayPacketsAction,
    StartRelayerAction.TYPE: StartRelayerAction,
    DelegateTokensAction.TYPE: DelegateTokensAction,
    UnbondTokensAction.TYPE: UnbondTokensAction,
    RedelegateTokensAction.TYPE: RedelegateTokensAction,
    DowntimeSlashAction.TYPE: DowntimeSlashAction,
    DoublesignSlashAction.TYPE: DoublesignSlashAction,
    UnjailValidatorAction.TYPE: UnjailValidatorAction,
    WaitTimeAction.TYPE: WaitTimeAction,
}
