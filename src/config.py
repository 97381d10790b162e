"""Configuration module for the School Administration API.

This module provides centralized configuration management, including directory
paths, database and API server settings, and the identity provider and file
server endpoints. All configuration values can be overridden via environment
variables.
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Directory Configuration ---

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.resolve()

# Data directory name
DATA_DIR_NAME = "data"
DATA_DIR = Path(os.getenv("DATA_DIR", str(ROOT_DIR / DATA_DIR_NAME)))

# --- Environment ---

# "development" enables destructive helpers such as clearing tables on seed
APP_ENV: str = os.getenv("APP_ENV", "production").lower()

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Database Configuration ---

# Falls back to a local SQLite file when DATABASE_URL is not set
_DATABASE_URL_ENV: str = os.getenv("DATABASE_URL", "").strip()
DATABASE_URL: str = _DATABASE_URL_ENV or f"sqlite:///{DATA_DIR}/school_admin.db"

# --- API Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))

# CORS allowed origins (comma-separated list)
# Default includes local development addresses. For production, set via
# CORS_ALLOWED_ORIGINS environment variable.
_CORS_ALLOWED_ORIGINS_STR: str = os.getenv(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173",
)
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in _CORS_ALLOWED_ORIGINS_STR.split(",")
    if origin.strip()
]

# --- Identity Provider (Clerk) Configuration ---

# Static bearer credential for the Clerk backend API
CLERK_SECRET_KEY: Optional[str] = os.getenv("CLERK_SECRET_KEY")

CLERK_API_URL: str = os.getenv("CLERK_API_URL", "https://api.clerk.com/v1").rstrip("/")

# Page size used when listing identity users (Clerk caps this at 500)
CLERK_PAGE_SIZE: int = int(os.getenv("CLERK_PAGE_SIZE", "100"))

# --- File Server Configuration ---

FILESERVER_URL: Optional[str] = os.getenv("FILESERVER_URL")

# --- Outbound HTTP ---

# Timeout in seconds for calls to the identity provider and the file server
HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "10"))

# --- Presentation ---

# Label shown for users that are not linked to a live identity record
NO_IDENTITY_LABEL: str = "No Clerk"
LINKED_IDENTITY_LABEL: str = "Clerk User"
EMPTY_PLACEHOLDER: str = "-"
