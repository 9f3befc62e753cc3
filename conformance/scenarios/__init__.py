"""
Canonical scenarios, assembled from reusable step groups.

``SCENARIOS`` maps a scenario name to a builder returning its ``Trace``.
"""

from typing import Callable, Dict

from ..chain.types import ChainID, ProposalStatus
from ..traces.actions import SubmitConsumerRemovalProposalAction, SubmitTextProposalAction
from ..traces.proposals import ConsumerRemovalProposal
from ..traces.schema import ChainState, Step, Trace
from .compatibility import (
    PROVIDER,
    compstep_start_provider_chain,
    compsteps_start_chains,
    compsteps_start_consumer_chain,
)
from .validators import DEFAULT_VALIDATORS, ValidatorConfig, ValidatorConfigs


def proposal_submission() -> Trace:
    """A lone text proposal submission with nothing checked."""
    return Trace([
        Step(SubmitTextProposalAction(title="Proposal 1", description="Description 1"), {}),
    ])


def proposal_in_state() -> Trace:
    """A removal proposal checked in the provider's proposal table."""
    return Trace([
        Step(
            action=SubmitConsumerRemovalProposalAction(),
            state={
                PROVIDER: ChainState(
                    proposals={
                        1: ConsumerRemovalProposal(
                            deposit=10000001,
                            chain=ChainID("foo"),
                            status=ProposalStatus.VOTING_PERIOD.value,
                        ),
                    },
                ),
            },
        ),
    ])


SCENARIOS: Dict[str, Callable[[], Trace]] = {
    "proposal-submission": proposal_submission,
    "proposal-in-state": proposal_in_state,
    "start-provider-chain": lambda: Trace(compstep_start_provider_chain()),
    "compatibility": lambda: Trace(compsteps_start_chains(["consu"], False)),
    "compatibility-transfer": lambda: Trace(compsteps_start_chains(["democ"], True)),
    "multiple-consumers": lambda: Trace(compsteps_start_chains(["consu", "densu"], False)),
}

__all__ = [
    "ValidatorConfig",
    "ValidatorConfigs",
    "DEFAULT_VALIDATORS",
    "PROVIDER",
    "compstep_start_provider_chain",
    "compsteps_start_consumer_chain",
    "compsteps_start_chains",
    "proposal_submission",
    "proposal_in_state",
    "SCENARIOS",
]
