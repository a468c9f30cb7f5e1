from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gymdesk.core.config import settings
from gymdesk.core.db import engine
from gymdesk.core.errors import install_error_handlers
from gymdesk.core.logs import log_api_requests, setup_logging
from gymdesk.routers import auth, gyms, members, memberships, notifications, payments, plans, staff

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # drain the connection pool on shutdown
    engine.dispose()


app = FastAPI(title="Gymdesk API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_api_requests)
install_error_handlers(app)

app.include_router(auth.router, prefix="/api")
app.include_router(gyms.router, prefix="/api")
app.include_router(members.router, prefix="/api")
app.include_router(staff.router, prefix="/api")
app.include_router(plans.router, prefix="/api")
app.include_router(memberships.router, prefix="/api")
app.include_router(payments.router, prefix="/api")
app.include_router(notifications.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok"}
