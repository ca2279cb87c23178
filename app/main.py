import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from app.core.config import settings
from app.core.errors import AppError
from app.core.payment_gateway import RazorpayGateway
from app.auth.otp import InMemoryOtpStore, OtpExchange
from app.auth.utils import send_otp_email
from app.routers import general, auth, admin, otp, forms, customers, payment
from app.database import engine, Base

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=settings.ALLOW_CREDENTIALS,
    allow_methods=settings.ALLOW_METHODS,
    allow_headers=settings.ALLOW_HEADERS,
)

app.state.otp_exchange = OtpExchange(
    store=InMemoryOtpStore(),
    send_email=send_otp_email,
    ttl_seconds=settings.OTP_TTL_SECONDS,
)
app.state.payment_gateway = RazorpayGateway.from_settings()

app.include_router(general.router)
app.include_router(auth.router)
app.include_router(admin.router)
app.include_router(otp.router)
app.include_router(forms.router)
app.include_router(customers.router)
app.include_router(payment.router)

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Database error"},
    )

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Invalid request body"},
    )
