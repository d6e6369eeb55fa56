from fastapi import FastAPI
from shortener_client.config import settings
from shortener_client.logging_config import setup_logging
from shortener_client.api.v1 import links, history

# Configure logging before anything logs
setup_logging(level=settings.log_level, json_format=settings.log_json)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Client for a URL shortening service, with local history",
    debug=settings.debug
)

@app.get("/")
def read_root():
    """Root endpoint with client information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "api_base": settings.api_base_url or "(same origin)",
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}




######## Include routers
app.include_router(links.router, prefix="/api/v1")
app.include_router(history.router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
