"""
Chain-level identifiers and value types.

This package provides:
- types: ChainID / ValidatorID, IBC heights, governance statuses
"""

from .types import (
    ChainID,
    ValidatorID,
    ProposalStatus,
    Height,
    IBCTransferParams,
    StartChainValidator,
    Rewards,
    ERR_CONSUMER_KEY_IN_USE,
)

__all__ = [
    "ChainID",
    "ValidatorID",
    "ProposalStatus",
    "Height",
    "IBCTransferParams",
    "StartChainValidator",
    "Rewards",
    "ERR_CONSUMER_KEY_IN_USE",
]
