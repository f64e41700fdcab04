# scoring.py
from __future__ import annotations
from typing import Dict, List, Tuple

from app.rules.ruleset import DEFAULT_RULES, Rule
from app.schemas import IncomingReceipt

def score_breakdown(
    receipt: IncomingReceipt,
    rules: List[Tuple[str, Rule]] | None = None,
) -> Dict[str, int]:
    """
    Returns {rule_name: points} for every rule, in rule order.
    The receipt is expected to have passed validate_receipt already.
    """
    return {name: rule(receipt) for name, rule in (DEFAULT_RULES if rules is None else rules)}

def calculate_points(receipt: IncomingReceipt) -> int:
    return sum(score_breakdown(receipt).values())
