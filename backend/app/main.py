import logging
import os
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError

from app.config import Config
from app.db.database import db
from app.routers import health, products, users, sales
from app.exceptions import (
    AppException,
    app_exception_handler,
    validation_exception_handler,
    database_exception_handler,
    generic_exception_handler,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await db.connect()
    await db.create_tables()
    os.makedirs(Config.UPLOAD_DIR, exist_ok=True)
    yield
    await db.disconnect()


app = FastAPI(
    title="Storefront API",
    version="1.0.0",
    description="Product catalog, accounts and sales reporting for the storefront",
    lifespan=lifespan
)

# Register exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(SQLAlchemyError, database_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(products.router)
app.include_router(users.router)
app.include_router(sales.router)

# Uploaded product and profile images
app.mount(
    Config.UPLOAD_URL_PREFIX,
    StaticFiles(directory=Config.UPLOAD_DIR, check_dir=False),
    name="uploads"
)
