"""
Identifiers and value types shared by actions, proposals and chain state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, NewType


ChainID = NewType("ChainID", str)
ValidatorID = NewType("ValidatorID", str)


# =============================================================================
# Governance
# =============================================================================

class ProposalStatus(Enum):
    """Lifecycle states of a gov v1 proposal, in their string form."""
    UNSPECIFIED = "PROPOSAL_STATUS_UNSPECIFIED"
    DEPOSIT_PERIOD = "PROPOSAL_STATUS_DEPOSIT_PERIOD"
    VOTING_PERIOD = "PROPOSAL_STATUS_VOTING_PERIOD"
    PASSED = "PROPOSAL_STATUS_PASSED"
    REJECTED = "PROPOSAL_STATUS_REJECTED"
    FAILED = "PROPOSAL_STATUS_FAILED"

    def __str__(self) -> str:
        return self.value


# Error fragment returned by the provider module
ERR_CONSUMER_KEY_IN_USE = "consumer key is already in use by a validator"


# =============================================================================
# IBC
# =============================================================================

@dataclass(frozen=True)
class Height:
    """IBC client height."""
    revision_number: int = 0
    revision_height: int = 0


@dataclass(frozen=True)
class IBCTransferParams:
    """ibc-transfer module parameters."""
    send_enabled: bool = False
    receive_enabled: bool = False


# =============================================================================
# Validators
# =============================================================================

@dataclass(frozen=True)
class StartChainValidator:
    """Genesis stake and token allocation of a validator."""
    id: ValidatorID = ValidatorID("")
    stake: int = 0
    allocation: int = 0


@dataclass(frozen=True)
class Rewards:
    """Expected distribution rewards on a chain."""
    is_rewarded: Dict[ValidatorID, bool] = field(default_factory=dict)
    # if true it will calculate if the validator/delegator is rewarded between 2 successive blocks,
    # otherwise it will calculate if it received any rewards since the 1st block
    is_incrementing_total_rewards: bool = False
    # if true checks rewards for "stake" token, otherwise checks rewards from
    # other chains (e.g. false is used to check if provider received rewards from a consumer chain)
    is_native_denom: bool = False
