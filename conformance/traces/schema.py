"""
Trace schema definitions: partial chain state, steps and traces.
"""

from dataclasses import dataclass, field, fields
from typing import Dict, Iterator, List, Optional, Sequence, Union

from ..chain.types import ChainID, Height, IBCTransferParams, Rewards, ValidatorID
from .actions import Action
from .proposals import Proposal


@dataclass(frozen=True)
class ChainState:
    """
    Expected state of one chain after a step.

    Every field is independently optional. ``None`` means "do not check";
    any other value, including an empty mapping or list, is checked exactly.
    """
    val_balances: Optional[Dict[ValidatorID, int]] = None
    proposed_consumer_chains: Optional[List[str]] = None
    val_powers: Optional[Dict[ValidatorID, int]] = None
    staked_tokens: Optional[Dict[ValidatorID, int]] = None
    ibc_transfer_params: Optional[IBCTransferParams] = None
    rewards: Optional[Rewards] = None
    # chain -> registered as consumer
    consumer_chains: Optional[Dict[ChainID, bool]] = None
    # validator -> consumer key address on the provider ("" when none assigned)
    assigned_keys: Optional[Dict[ValidatorID, str]] = None
    # validator -> provider consensus address
    provider_keys: Optional[Dict[ValidatorID, str]] = None
    consumer_pending_packet_queue_size: Optional[int] = None
    registered_consumer_reward_denoms: Optional[List[str]] = None
    # client id -> frozen height
    clients_frozen_heights: Optional[Dict[str, Height]] = None
    # validator -> consumer chains it must validate
    has_to_validate: Optional[Dict[ValidatorID, List[ChainID]]] = None
    # proposal index -> proposal
    proposals: Optional[Dict[int, Proposal]] = None
    consumer_commission_rates: Optional[Dict[ValidatorID, float]] = None

    def specified_fields(self) -> List[str]:
        """Names of the fields this state asserts, in declaration order."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]


State = Dict[ChainID, ChainState]


@dataclass(frozen=True)
class Step:
    """An action and the partial state expected once it has been applied."""
    action: Action
    state: State = field(default_factory=dict)


@dataclass(frozen=True)
class Trace:
    """
    An ordered sequence of steps.

    Order is execution order. Traces compose by plain concatenation:
    ``Trace(a) + b`` appends the steps of ``b`` without merging anything.
    """
    steps: List[Step] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> Step:
        return self.steps[index]

    def __add__(self, other: Union["Trace", Sequence[Step]]) -> "Trace":
        other_steps = other.steps if isinstance(other, Trace) else list(other)
        return Trace(list(self.steps) + other_steps)
