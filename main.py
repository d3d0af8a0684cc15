# main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import logging
import time

from config import Settings
from database import CustomerStore, init_db
from paths import resolve
from Services.customer_router import router as customer_router
from Services.errors import CustomerError

logger = logging.getLogger(__name__)


def error_response(status_code: int, exc) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"message": f"An error occurred! - {exc}"}
    )


def create_app(settings: Optional[Settings] = None, store: Optional[CustomerStore] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    # Configure logging
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    app = FastAPI(
        title="Customer Mock API",
        description="""
        In-memory mock API for front-end development:
        - List, create, update and delete customers
        - Seeded from a static JSON file at startup
        - Every change is lost when the process stops
        """,
        version="1.0.0"
    )
    app.state.settings = settings

    # A store handed in by the caller is used as is; otherwise seed one on startup
    seed_on_startup = store is None
    app.state.store = store if store is not None else CustomerStore()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        # Unhandled errors re-raise out of call_next and become a 500 further out
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s %d %.3f ms",
                request.method, request.url.path, status_code, elapsed
            )

    # Unknown routes and methods get a generic answer
    @app.exception_handler(StarletteHTTPException)
    async def route_not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=501, content={"message": "Route not found!"})
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})

    @app.exception_handler(CustomerError)
    async def customer_error_handler(request: Request, exc: CustomerError):
        logger.warning("Client error on %s %s: %s", request.method, request.url.path, exc)
        return error_response(400, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Invalid input on %s %s: %s", request.method, request.url.path, exc.errors())
        return error_response(400, "Invalid customer data")

    # Exception handler for everything else
    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception):
        logger.error(f"Error processing request: {exc}", exc_info=True)
        return error_response(500, exc)

    # Include routers
    app.include_router(
        customer_router,
        prefix="/customers",
        tags=["customers"]
    )

    # Initialize store on startup
    @app.on_event("startup")
    async def startup_event():
        logger.info("*** SIMPLE MOCK API *** running on %s:%d", settings.host, settings.port)
        if not seed_on_startup:
            return
        seed_file = resolve(settings.seed_file)
        try:
            init_db(app.state.store, seed_file)
        except Exception as e:
            logger.error(f"Failed to load seed data from {seed_file}: {e}", exc_info=True)
            raise

    @app.get("/")
    async def root():
        return {"hello": "world"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port, log_level="debug")
