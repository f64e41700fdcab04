from fastapi import APIRouter, Depends
from ..schemas import IncomingReceipt, ProcessResponse, PointsResponse, ErrorResponse
from ..services.receipts import process_receipt, get_points
from ..services.store import ReceiptStore, get_store


router = APIRouter(prefix="/receipts", tags=["receipts"])

@router.post("/process", response_model=ProcessResponse,
             responses={400: {"model": ErrorResponse, "description": "The receipt is invalid."}})
def process(payload: IncomingReceipt, store: ReceiptStore = Depends(get_store)):
    return {"id": process_receipt(payload, store)}

@router.get("/{id}/points", response_model=PointsResponse,
            responses={404: {"model": ErrorResponse, "description": "No receipt found for that ID."}})
def points(id: str, store: ReceiptStore = Depends(get_store)):
    return {"points": get_points(id, store)}
