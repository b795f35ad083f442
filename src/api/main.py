"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import src.api.dependencies as dependencies
from src.api.endpoints.acceptance_pages import router as pages_router
from src.api.endpoints.contract import router as contract_router
from src.error_handler import ErrorHandler, GatewayError

config = dependencies.get_config()

# Setup logging
logging.basicConfig(level=logging.INFO if config.server.is_production else logging.DEBUG)
logger = logging.getLogger(__name__)

error_handler = ErrorHandler()

# Initialize FastAPI app
app = FastAPI(
    title="Doorbin Contract Acceptance Gateway",
    description="Contract acceptance pages and proxy to the contract automation webhook",
    version="1.0.0",
    docs_url=None if config.server.is_production else "/docs",
    redoc_url=None if config.server.is_production else "/redoc",
    openapi_url=None if config.server.is_production else "/openapi.json",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.server.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register contract proxy router (root and /api, the path the original frontend calls)
app.include_router(contract_router)
app.include_router(contract_router, prefix="/api")

# Register acceptance pages
app.include_router(pages_router)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    status_code, body = error_handler.handle_exception(exc, context={"path": request.url.path})
    return JSONResponse(status_code=status_code, content=body)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {
        "service": "Doorbin Contract Acceptance Gateway",
        "status": "healthy",
        "environment": config.server.environment,
        "integrations_mode": config.integrations.mode,
        "timestamp": datetime.now().isoformat(),
    }


@app.on_event("startup")
async def startup_event():
    """Log the resolved upstream target"""
    logger.info(
        "Starting contract gateway: environment=%s integrations=%s webhook=%s fetch_timeout=%ss submit_timeout=%ss",
        config.server.environment,
        config.integrations.mode,
        config.webhook.url,
        config.webhook.fetch_timeout_seconds,
        config.webhook.submit_timeout_seconds,
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down contract gateway...")


def main() -> None:
    uvicorn.run(
        "src.api.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=not config.server.is_production,
    )


if __name__ == "__main__":
    main()
