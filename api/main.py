# api/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shelves.config import Settings, configure_logging
from shelves.sa.database import get_database
from api.routes.shelves import router as shelves_router

logger = logging.getLogger(__name__)

app = FastAPI(title="Smart Shelves")

# CORS configuration
origins = [
    "http://localhost:5173",        # Local Vite dev server
    "http://localhost:4173",        # Local Vite preview
    "http://localhost",             # Local production URL
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    configure_logging(Settings.from_env().log_level)
    get_database().init_db()
    logger.info("Database schema ready")

@app.get("/")
async def root():
    return {"message": "Smart Shelves"}

app.include_router(shelves_router)
