# app/services/store.py
import threading
import uuid
from typing import Dict

from app.errors import ReceiptNotFound
from app.models import StoredReceipt

class ReceiptStore:
    """
    Process-lifetime mapping of receipt id -> points.
    Every read and write of the backing dict happens under one lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._receipts: Dict[str, StoredReceipt] = {}

    def insert(self, points: int) -> str:
        with self._lock:
            receipt_id = str(uuid.uuid4())
            while receipt_id in self._receipts:
                receipt_id = str(uuid.uuid4())
            self._receipts[receipt_id] = StoredReceipt(id=receipt_id, points=points)
        return receipt_id

    def lookup(self, receipt_id: str) -> int:
        with self._lock:
            rec = self._receipts.get(receipt_id)
        if rec is None:
            raise ReceiptNotFound()
        return rec.points

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)

_store = ReceiptStore()

def get_store() -> ReceiptStore:
    return _store
