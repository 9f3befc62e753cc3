"""
Governance proposals as they appear in expected chain state.

Each proposal kind is its own dataclass tagged with a ``TYPE`` discriminator.
The set of kinds is closed: ``PROPOSAL_TYPES`` lists every kind the codec
accepts, and anything else is rejected on encode and on decode.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Type

from ..chain.types import ChainID, Height, IBCTransferParams
from .wire import wire_field


@dataclass(frozen=True)
class Proposal:
    """Fields common to every proposal kind."""
    TYPE: ClassVar[str] = ""

    deposit: int = 0
    status: str = ""


@dataclass(frozen=True)
class TextProposal(Proposal):
    TYPE: ClassVar[str] = "text"

    title: str = ""
    description: str = ""


@dataclass(frozen=True)
class ConsumerAdditionProposal(Proposal):
    """Proposal to launch a consumer chain."""
    TYPE: ClassVar[str] = "consumer_addition"

    chain: ChainID = ChainID("")
    spawn_time: int = 0
    initial_height: Height = field(default_factory=Height)
    # not reported by providers before partial set security
    top_n: int = wire_field(0, optional=True)


@dataclass(frozen=True)
class ConsumerRemovalProposal(Proposal):
    """Proposal to stop a consumer chain."""
    TYPE: ClassVar[str] = "consumer_removal"

    chain: ChainID = ChainID("")
    stop_time: int = 0


@dataclass(frozen=True)
class ConsumerModificationProposal(Proposal):
    TYPE: ClassVar[str] = "consumer_modification"

    chain: ChainID = ChainID("")
    top_n: int = 0


@dataclass(frozen=True)
class IBCTransferParamsProposal(Proposal):
    TYPE: ClassVar[str] = "ibc_transfer_params"

    title: str = ""
    params: IBCTransferParams = field(default_factory=IBCTransferParams)


@dataclass(frozen=True)
class ParamsProposal(Proposal):
    """Legacy parameter-change proposal."""
    TYPE: ClassVar[str] = "params"

    subspace: str = ""
    key: str = ""
    value: str = ""


@dataclass(frozen=True)
class UpgradeProposal(Proposal):
    """Software upgrade proposal."""
    TYPE: ClassVar[str] = "upgrade"

    title: str = ""
    description: str = ""
    upgrade_height: int = 0
    upgrade_type: str = ""


@dataclass(frozen=True)
class ChangeRewardDenomsProposal(Proposal):
    TYPE: ClassVar[str] = "change_reward_denoms"

    denoms_to_add: List[str] = field(default_factory=list)
    denoms_to_remove: List[str] = field(default_factory=list)


PROPOSAL_TYPES: Dict[str, Type[Proposal]] = {
    TextProposal.TYPE: TextProposal,
    ConsumerAdditionProposal.TYPE: ConsumerAdditionProposal,
    ConsumerRemovalProposal.TYPE: ConsumerRemovalProposal,
    ConsumerModificationProposal.TYPE: ConsumerModificationProposal,
    IBCTransferParamsProposal.TYPE: IBCTransferParamsProposal,
    ParamsProposal.TYPE: ParamsProposal,
    UpgradeProposal.TYPE: UpgradeProposal,
    ChangeRewardDenomsProposal.TYPE: ChangeRewardDenomsProposal,
}
