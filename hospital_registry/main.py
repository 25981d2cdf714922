from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time
import logging

from .api.deps import get_registry
from .api.v1.doctors import router as doctors_router
from .api.v1.patients import router as patients_router
from .api.v1.people import router as people_router
from .api.v1.selection import router as selection_router
from .api.v1.menus import router as menus_router
from .core.config import settings
from .core.errors import GeneralSearchNotSupportedError
from .services.registry import HospitalRegistry, RegistryChange

# Configure logging
logging.basicConfig(level=settings.get_log_level)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    description="In-memory registry of a hospital's doctors and patients",
    openapi_url="/api/v1/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Middleware setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom middleware for request logging and timing
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    # Log request
    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Time: {process_time:.4f}s"
    )

    return response

# Exception handlers
@app.exception_handler(404)
async def not_found_handler(request: Request, exc: HTTPException):
    detail = getattr(exc, "detail", None)
    return JSONResponse(
        status_code=404,
        content={
            "error": "Not Found",
            "message": detail if detail and detail != "Not Found" else "The requested resource was not found",
            "path": str(request.url.path)
        }
    )

@app.exception_handler(GeneralSearchNotSupportedError)
async def not_supported_handler(request: Request, exc: GeneralSearchNotSupportedError):
    return JSONResponse(
        status_code=501,
        content={
            "error": "Not Implemented",
            "message": exc.message,
            "path": str(request.url.path)
        }
    )

@app.exception_handler(500)
async def internal_error_handler(request: Request, exc: Exception):
    logger.error(f"Internal server error: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred"
        }
    )

# Include routers
app.include_router(doctors_router, prefix="/api/v1")
app.include_router(patients_router, prefix="/api/v1")
app.include_router(people_router, prefix="/api/v1")
app.include_router(selection_router, prefix="/api/v1")
app.include_router(menus_router, prefix="/api/v1")

def log_registry_change(change: RegistryChange) -> None:
    logger.info(
        f"Registry {change.action.value}: {change.record.name} - "
        f"Doctors: {change.doctor_count}, Patients: {change.patient_count}, "
        f"Total: {change.total_people_count}"
    )

def create_registry() -> HospitalRegistry:
    """Build the registry shared by the whole session."""
    registry = HospitalRegistry(
        name=settings.HOSPITAL_NAME,
        appointment_price=settings.APPOINTMENT_PRICE
    )
    registry.add_listener(log_registry_change)
    return registry

# Startup and shutdown events
@app.on_event("startup")
async def startup_event():
    """Initialize application on startup."""
    logger.info("Starting Hospital Registry...")

    app.state.registry = create_registry()
    logger.info(f"Registry created for {settings.HOSPITAL_NAME}")

    logger.info("Application startup complete")

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on application shutdown."""
    registry = getattr(app.state, "registry", None)
    if registry is not None:
        logger.info(
            f"Shutting down Hospital Registry with {registry.total_people_count} people registered "
            f"(nothing is persisted)"
        )
    else:
        logger.info("Shutting down Hospital Registry...")

# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "version": settings.VERSION
    }

# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Welcome to the Hospital Registry API",
        "version": settings.VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/health",
        "menu": "/api/v1/menus/main"
    }

# API Info endpoint
@app.get("/api/v1/info")
async def api_info(registry: HospitalRegistry = Depends(get_registry)):
    """API information endpoint."""
    return {
        "name": settings.APP_NAME,
        "version": settings.VERSION,
        "hospital": registry.name,
        "appointment_price": registry.appointment_price,
        "endpoints": {
            "doctors": "/api/v1/doctors",
            "patients": "/api/v1/patients",
            "people": "/api/v1/people",
            "selection": "/api/v1/selection",
            "menus": "/api/v1/menus",
            "docs": "/docs",
            "openapi": "/api/v1/openapi.json"
        }
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hospital_registry.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info"
    )
