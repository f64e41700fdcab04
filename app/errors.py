# app/errors.py

class ReceiptError(Exception):
    """Base for per-request failures surfaced to the client as {"error": message}."""
    status_code = 500
    message = "Internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

class InvalidReceipt(ReceiptError):
    status_code = 400
    message = "The receipt is invalid."

class ReceiptNotFound(ReceiptError):
    status_code = 404
    message = "No receipt found for that ID."
