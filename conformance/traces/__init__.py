"""
Trace module for describing, persisting and replaying conformance scenarios.
"""

from .errors import (
    TraceError,
    TraceEncodeError,
    TraceDecodeError,
    TraceIOError,
    TraceMismatchError,
    UnknownProfileError,
)
from .proposals import (
    Proposal,
    TextProposal,
    ConsumerAdditionProposal,
    ConsumerRemovalProposal,
    ConsumerModificationProposal,
    IBCTransferParamsProposal,
    ParamsProposal,
    UpgradeProposal,
    ChangeRewardDenomsProposal,
    PROPOSAL_TYPES,
)
from .actions import (
    Action,
    StartChainAction,
    StartConsumerChainAction,
    SendTokensAction,
    SubmitTextProposalAction,
    SubmitConsumerAdditionProposalAction,
    SubmitConsumerRemovalProposalAction,
    SubmitConsumerModificationProposalAction,
    SubmitParamChangeLegacyProposalAction,
    SubmitEnableTransfersProposalAction,
    SubmitChangeRewardDenomsProposalAction,
    VoteGovProposalAction,
    AssignConsumerPubKeyAction,
    OptInAction,
    OptOutAction,
    AddChainToRelayerAction,
    AddIbcConnectionAction,
    AddIbcChannelAction,
    TransferChannelCompleteAction,
    RelayPacketsAction,
    StartRelayerAction,
    DelegateTokensAction,
    UnbondTokensAction,
    RedelegateTokensAction,
    DowntimeSlashAction,
    DoublesignSlashAction,
    UnjailValidatorAction,
    WaitTimeAction,
    ACTION_TYPES,
    check_outcome,
)
from .schema import ChainState, State, Step, Trace
from .profiles import SchemaProfile, CURRENT, COMPATIBILITY, PROFILES, get_profile
from .codec import (
    encode_proposal,
    decode_proposal,
    encode_action,
    decode_action,
    encode_chain_state,
    decode_chain_state,
    encode_step,
    decode_step,
    encode_trace,
    decode_trace,
)
from .parser import parse_trace, read_trace_from_file
from .writer import dump_trace, write_trace_to_file
from .compare import (
    Difference,
    diff_values,
    diff_traces,
    assert_traces_equal,
    diff_chain_state,
    diff_state,
    round_trip,
    format_differences,
)

__all__ = [
    # Errors
    "TraceError",
    "TraceEncodeError",
    "TraceDecodeError",
    "TraceIOError",
    "TraceMismatchError",
    "UnknownProfileError",
    # Proposals
    "Proposal",
    "TextProposal",
    "ConsumerAdditionProposal",
    "ConsumerRemovalProposal",
    "ConsumerModificationProposal",
    "IBCTransferParamsProposal",
    "ParamsProposal",
    "UpgradeProposal",
    "ChangeRewardDenomsProposal",
    "PROPOSAL_TYPES",
    # Actions
    "Action",
    "StartChainAction",
    "StartConsumerChainAction",
    "SendTokensAction",
    "SubmitTextProposalAction",
    "SubmitConsumerAdditionProposalAction",
    "SubmitConsumerRemovalProposalAction",
    "SubmitConsumerModificationProposalAction",
    "SubmitParamChangeLegacyProposalAction",
    "SubmitEnableTransfersProposalAction",
    "SubmitChangeRewardDenomsProposalAction",
    "VoteGovProposalAction",
    "AssignConsumerPubKeyAction",
    "OptInAction",
    "OptOutAction",
    "AddChainToRelayerAction",
    "AddIbcConnectionAction",
    "AddIbcChannelAction",
    "TransferChannelCompleteAction",
    "RelayPacketsAction",
    "StartRelayerAction",
    "DelegateTokensAction",
    "UnbondTokensAction",
    "RedelegateTokensAction",
    "DowntimeSlashAction",
    "DoublesignSlashAction",
    "UnjailValidatorAction",
    "WaitTimeAction",
    "ACTION_TYPES",
    "check_outcome",
    # Schema
    "ChainState",
    "State",
    "Step",
    "Trace",
    # Profiles
    "SchemaProfile",
    "CURRENT",
    "COMPATIBILITY",
    "PROFILES",
    "get_profile",
    # Codec
    "encode_proposal",
    "decode_proposal",
    "encode_action",
    "decode_action",
    "encode_chain_state",
    "decode_chain_state",
    "encode_step",
    "decode_step",
    "encode_trace",
    "decode_trace",
    # I/O
    "parse_trace",
    "read_trace_from_file",
    "dump_trace",
    "write_trace_to_file",
    # Comparison
    "Difference",
    "diff_values",
    "diff_traces",
    "assert_traces_equal",
    "diff_chain_state",
    "diff_state",
    "round_trip",
    "format_differences",
]
