"""
Outcome tree builder.

Enumerates the fixed pass/fail scenarios of a challenge cycle with their
closed-form results. The hedge repetition counts (two wins on a full pass,
three on the best case, and so on) belong to the scenario narratives and are
not derived from the win-rate inputs.
"""

import logging

from prophedge.config.parameters import PlannerConfiguration
from prophedge.models.enums import OutcomeScenario
from prophedge.models.plan import DerivedMetrics, OutcomeLeaf


logger = logging.getLogger(__name__)


def _leaf(
    scenario: OutcomeScenario,
    label: str,
    status: str,
    prop_result: float,
    broker_result: float,
    cash_result: float,
) -> OutcomeLeaf:
    return OutcomeLeaf(
        scenario=scenario,
        label=label,
        status=status,
        prop_result=prop_result,
        broker_result=broker_result,
        cash_result=cash_result,
    )


def compute_outcome_tree(
    config: PlannerConfiguration, derived: DerivedMetrics
) -> list[OutcomeLeaf]:
    """
    Build the five scenario leaves in display order.

    Args:
        config: Planner configuration.
        derived: Currency amounts derived from the configuration.

    Returns:
        Leaves for full pass, partial pass, full fail, break-even and best case.
    """
    phase1_profit = derived.phase1_target_amount
    phase2_profit = derived.phase2_target_amount
    broker_win = config.broker_risk * config.rr_broker
    broker_loss = -config.broker_risk
    fee = config.fee_paid
    refund_result = 0.0 if config.refundable_fee else -fee

    leaves = [
        _leaf(
            OutcomeScenario.FULL_PASS,
            "Pass P1 → Pass P2",
            "Funded + payout",
            prop_result=phase1_profit + phase2_profit,
            broker_result=broker_win * 2,
            cash_result=phase1_profit + phase2_profit + broker_win * 2,
        ),
        _leaf(
            OutcomeScenario.PARTIAL_PASS,
            "Pass P1 → Fail P2",
            "Reset after P2",
            prop_result=phase1_profit - fee,
            broker_result=broker_win + broker_loss,
            cash_result=phase1_profit - fee + broker_win + broker_loss,
        ),
        _leaf(
            OutcomeScenario.FULL_FAIL,
            "Fail P1",
            "Reset after P1",
            prop_result=-fee,
            broker_result=broker_loss * 2,
            cash_result=-fee + broker_loss * 2,
        ),
        # One hedge win offset by one hedge loss of equal size.
        _leaf(
            OutcomeScenario.BREAK_EVEN,
            "Break-even cycle",
            "Refund + flat",
            prop_result=refund_result,
            broker_result=broker_win - broker_win,
            cash_result=refund_result,
        ),
        _leaf(
            OutcomeScenario.BEST_CASE,
            "Best-case streak",
            "Fast pass",
            prop_result=phase1_profit + phase2_profit,
            broker_result=broker_win * 3,
            cash_result=phase1_profit + phase2_profit + broker_win * 3,
        ),
    ]
    logger.debug("Outcome tree built with %d leaves", len(leaves))
    return leaves
