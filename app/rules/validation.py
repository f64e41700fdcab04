# app/rules/validation.py
import re
from datetime import date

from app.schemas import IncomingReceipt

# Retailer names may contain "&"; item descriptions may not.
RETAILER_RE = re.compile(r"[\w\s\-&]+", re.ASCII)
DESCRIPTION_RE = re.compile(r"[\w\s\-]+", re.ASCII)
AMOUNT_RE = re.compile(r"\d+\.\d{2}", re.ASCII)

DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
TIME_RE = re.compile(r"(\d{2}):(\d{2})", re.ASCII)

def parse_purchase_date(value: str) -> date:
    """Strict YYYY-MM-DD; raises ValueError on anything else."""
    m = DATE_RE.fullmatch(value or "")
    if not m:
        raise ValueError(f"Invalid purchase date: {value!r}")
    year, month, day = (int(g) for g in m.groups())
    return date(year, month, day)

def parse_purchase_time(value: str) -> tuple[int, int]:
    """Strict 24h HH:MM; returns (hour, minute)."""
    m = TIME_RE.fullmatch(value or "")
    if not m:
        raise ValueError(f"Invalid purchase time: {value!r}")
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Invalid purchase time: {value!r}")
    return hour, minute

def _is_amount(value: str) -> bool:
    return AMOUNT_RE.fullmatch(value) is not None

def validate_receipt(receipt: IncomingReceipt) -> bool:
    """True when every field of the receipt is well-formed enough to score."""
    if not RETAILER_RE.fullmatch(receipt.retailer):
        return False

    try:
        parse_purchase_date(receipt.purchase_date)
        parse_purchase_time(receipt.purchase_time)
    except ValueError:
        return False

    if not receipt.items:
        return False

    for item in receipt.items:
        if not DESCRIPTION_RE.fullmatch(item.short_description):
            return False
        if not _is_amount(item.price):
            return False

    return _is_amount(receipt.total)
