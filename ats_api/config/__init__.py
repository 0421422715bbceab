"""Configuration module for the ATS API."""

from .settings import settings, get_settings
from .database import get_db, engine, SessionLocal, Base

__all__ = ["settings", "get_settings", "get_db", "engine", "SessionLocal", "Base"]
