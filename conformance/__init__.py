"""
Conformance traces for provider/consumer validator-set replication.

A trace is an ordered list of steps; each step pairs an action with the
partial chain state expected after it. Traces can be built in code, written
to JSON or YAML, and read back by tooling built against another protocol
version.
"""

from .chain import (
    ChainID,
    ValidatorID,
    ProposalStatus,
    Height,
    IBCTransferParams,
    StartChainValidator,
    Rewards,
)
from .traces import (
    Action,
    Proposal,
    ChainState,
    State,
    Step,
    Trace,
    SchemaProfile,
    TraceError,
    TraceEncodeError,
    TraceDecodeError,
    TraceIOError,
    TraceMismatchError,
    read_trace_from_file,
    write_trace_to_file,
)

__all__ = [
    # Chain
    "ChainID",
    "ValidatorID",
    "ProposalStatus",
    "Height",
    "IBCTransferParams",
    "StartChainValidator",
    "Rewards",
    # Traces
    "Action",
    "Proposal",
    "ChainState",
    "State",
    "Step",
    "Trace",
    "SchemaProfile",
    "TraceError",
    "TraceEncodeError",
    "TraceDecodeError",
    "TraceIOError",
    "TraceMismatchError",
    "read_trace_from_file",
    "write_trace_to_file",
]
