from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.config import settings
from app.database import engine, Base
from app.exceptions import register_exception_handlers
from app.users.routers import router as auth_router
from app.finance.accounts.router import router as accounts_router
from app.finance.categories.router import router as categories_router
from app.finance.transactions.router import router as transactions_router


if settings.LOG_FILE:
    logger.add(settings.LOG_FILE, rotation="500 MB", level=settings.LOG_LEVEL)


# Database startup
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup")
    Base.metadata.create_all(bind=engine)
    yield
    logger.info("Application shutdown")


# Create app
app = FastAPI(
    title="LEDGER API",
    description="Personal finance tracking: accounts, categories, transactions and running balances.",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# Routers
app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
app.include_router(accounts_router, prefix="/api/finance", tags=["Finance - Accounts"])
app.include_router(
    categories_router,
    prefix="/api/finance/accounts/{account_id}/categories",
    tags=["Finance - Categories"],
)
app.include_router(
    transactions_router,
    prefix="/api/finance/accounts/{account_id}/transactions",
    tags=["Finance - Transactions"],
)


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
