from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from .api.endpoints import pages, students
from .core.config import settings
from .core.database import engine, Base
from .models import student  # Import to register the model
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure properly for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def startup_event():
    """Create database tables"""
    logger.info("Starting Event Registration API...")
    Base.metadata.create_all(bind=engine)

# Include routers
app.include_router(
    students.router,
    prefix=f"{settings.API_V1_STR}/students",
    tags=["students"]
)

app.include_router(pages.router, tags=["pages"])

@app.get("/")
async def root():
    return RedirectResponse(url="/student-register")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000) 
