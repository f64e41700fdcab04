# app/rules/ruleset.py
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext
from typing import Callable, List, Tuple

from app.rules.validation import parse_purchase_date, parse_purchase_time
from app.schemas import IncomingReceipt

# -----------------------------
# Weights
# -----------------------------
POINTS_ROUND_TOTAL = 50
POINTS_QUARTER_TOTAL = 25
POINTS_PER_ITEM_PAIR = 5
POINTS_ODD_DAY = 6
POINTS_AFTERNOON = 10

DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")

# exclusive on both ends: only the 15:xx hour qualifies
AFTERNOON_AFTER_HOUR = 14
AFTERNOON_BEFORE_HOUR = 16

# -----------------------------
# Helpers
# -----------------------------
def _exact(amount: str):
    # enough digits that "\d+\.\d{2}" times 100 or 0.2 never rounds
    ctx = getcontext().copy()
    ctx.prec = max(ctx.prec, len(amount) + 4)
    return localcontext(ctx)

def _to_cents(amount: str) -> int:
    with _exact(amount):
        return int((Decimal(amount) * 100).to_integral_value(rounding=ROUND_HALF_UP))

# -----------------------------
# Rules
# Each takes a validated receipt and returns its points. A value that
# fails to parse contributes 0 instead of raising.
# -----------------------------
def points_for_retailer(receipt: IncomingReceipt) -> int:
    return sum(1 for c in receipt.retailer if c.isalnum())

def points_for_total(receipt: IncomingReceipt) -> int:
    try:
        cents = _to_cents(receipt.total)
    except (InvalidOperation, ValueError, OverflowError):
        return 0

    points = 0
    if cents % 100 == 0:
        points += POINTS_ROUND_TOTAL
    # stacks with the round-dollar bonus
    if cents % 25 == 0:
        points += POINTS_QUARTER_TOTAL
    return points

def points_for_item_pairs(receipt: IncomingReceipt) -> int:
    return (len(receipt.items) // 2) * POINTS_PER_ITEM_PAIR

def points_for_descriptions(receipt: IncomingReceipt) -> int:
    """
    ceil(price * 0.2) for every item whose trimmed description length is a
    multiple of 3. An all-whitespace description has length 0 and qualifies.
    """
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip()) % DESCRIPTION_LENGTH_FACTOR != 0:
            continue
        try:
            price = Decimal(item.price)
        except InvalidOperation:
            continue
        if not price.is_finite():
            continue
        with _exact(item.price):
            points += math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER)
    return points

def points_for_items(receipt: IncomingReceipt) -> int:
    return points_for_item_pairs(receipt) + points_for_descriptions(receipt)

def points_for_date(receipt: IncomingReceipt) -> int:
    try:
        purchased = parse_purchase_date(receipt.purchase_date)
    except ValueError:
        return 0
    return POINTS_ODD_DAY if purchased.day % 2 == 1 else 0

def points_for_time(receipt: IncomingReceipt) -> int:
    try:
        hour, _ = parse_purchase_time(receipt.purchase_time)
    except ValueError:
        return 0
    if AFTERNOON_AFTER_HOUR < hour < AFTERNOON_BEFORE_HOUR:
        return POINTS_AFTERNOON
    return 0

Rule = Callable[[IncomingReceipt], int]

DEFAULT_RULES: List[Tuple[str, Rule]] = [
    ("retailer", points_for_retailer),
    ("total", points_for_total),
    ("item_pairs", points_for_item_pairs),
    ("descriptions", points_for_descriptions),
    ("purchase_date", points_for_date),
    ("purchase_time", points_for_time),
]
