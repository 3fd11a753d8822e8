"""Shared dependencies for API routes."""

from functools import lru_cache

from config import settings
from services.ai_service import AIService, ai_service
from services.catalog import Catalog, build_catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Built once per process; read-only afterwards."""
    return build_catalog(settings.job_csv_dir)


def get_ai_service() -> AIService:
    return ai_service
