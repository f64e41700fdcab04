from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from .config import settings
from .errors import ReceiptError, InvalidReceipt
from .routes.receipts import router as receipts_router

app = FastAPI(title=settings.APP_NAME,
              description="Scores receipts and serves the awarded points",
    version="0.1.0",
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json")

app.include_router(receipts_router)

@app.exception_handler(ReceiptError)
async def receipt_error_handler(request: Request, exc: ReceiptError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

# missing fields, wrong types and undecodable bodies are all just an invalid receipt
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=InvalidReceipt.status_code, content={"error": InvalidReceipt.message})

@app.get("/health")
def health():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
