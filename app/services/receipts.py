# app/services/receipts.py
import logging

from app.errors import InvalidReceipt, ReceiptNotFound
from app.rules.validation import validate_receipt
from app.schemas import IncomingReceipt
from app.services.scoring import calculate_points, score_breakdown
from app.services.store import ReceiptStore
from app.utils.logging import logger

def process_receipt(receipt: IncomingReceipt, store: ReceiptStore) -> str:
    """Validate, score and store a receipt; returns the new receipt id."""
    if not validate_receipt(receipt):
        logger.info("Rejected receipt from retailer %r", receipt.retailer)
        raise InvalidReceipt()

    points = calculate_points(receipt)
    receipt_id = store.insert(points)

    logger.info("Receipt %s scored %s points", receipt_id, points)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Receipt %s breakdown: %s", receipt_id, score_breakdown(receipt))
    return receipt_id

def get_points(receipt_id: str, store: ReceiptStore) -> int:
    try:
        return store.lookup(receipt_id)
    except ReceiptNotFound:
        logger.info("No receipt found for id %s", receipt_id)
        raise
