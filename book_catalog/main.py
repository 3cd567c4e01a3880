"""
Main application entry point.
"""

import logging
import os

from fastapi import FastAPI

from book_catalog import __version__
from book_catalog.api.v1.book_endpoints import router as books_router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

app = FastAPI(
    title="Book Catalog API",
    description="Create, update, delete and search book records.",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Include API routers
app.include_router(books_router, prefix="/api/v1", tags=["books"])

@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Book Catalog API",
        "docs": "/docs",
        "health": "/api/v1/health"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "book_catalog.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
