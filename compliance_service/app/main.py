from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import compliance_engine, Base
from shared.core.logging_config import setup_logging
from shared.helpers.exception_handler import setup_exception_handlers
from shared.wrappers.response_wrapper import JsonResponseMiddleware

# Import all models to ensure they are registered with SQLAlchemy
from . import models  # noqa: F401
from .router.common import export_router, import_router
from .router.ghs import ghs_router
from .router.locations import locations_router
from .router.master_data import master_data_router
from .router.products import products_router
from .router.risk_assessments import risk_assessments_router
from .router.sds import sds_router
from .router.site_registers import site_registers_router
from .router.suppliers import suppliers_router
from .router.system import system_router
from .router.users import users_router

setup_logging()

app = FastAPI(title="Compliance Service API")

# Create all tables
Base.metadata.create_all(bind=compliance_engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(JsonResponseMiddleware)

setup_exception_handlers(app)

# Include routers
app.include_router(master_data_router.router)
app.include_router(suppliers_router.router)
app.include_router(locations_router.router)
app.include_router(sds_router.router)
app.include_router(products_router.router)
app.include_router(site_registers_router.router)
app.include_router(risk_assessments_router.router)
app.include_router(ghs_router.router)
app.include_router(users_router.router)
app.include_router(system_router.router)
app.include_router(export_router.router)
app.include_router(import_router.router)


@app.get("/health")
def health():
    return {"service": "compliance", "healthy": True}
