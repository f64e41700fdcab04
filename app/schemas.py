
from pydantic import BaseModel, Field
from typing import List

# Wire shapes for the receipts endpoints
class IncomingItem(BaseModel):
    short_description: str = Field(alias="shortDescription")
    price: str

class IncomingReceipt(BaseModel):
    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    items: List[IncomingItem]
    total: str

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int

class ErrorResponse(BaseModel):
    error: str
