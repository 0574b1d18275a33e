from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from core import db, logs, settings
from customers import router as customers_router
from diagnostics import router as diagnostics_router
from invoices import router as invoices_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    logs.configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

# Allow the dashboard front end to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router, tags=["auth"])
app.include_router(customers_router.router, tags=["customers"])
app.include_router(invoices_router.router, tags=["invoices"])
app.include_router(diagnostics_router.router, tags=["diagnostics"])
