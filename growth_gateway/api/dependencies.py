"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from growth_gateway.config import settings
from growth_gateway.domain.models import RateCatalog
from growth_gateway.domain.recommendations import RuleSettings
from growth_gateway.infrastructure.catalog.loader import load_catalog


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_catalog() -> RateCatalog:
    """Provide the catalog snapshot for this request"""
    return load_catalog(settings.catalog_path)


def get_rule_settings() -> RuleSettings:
    """Provide recommendation thresholds from application settings"""
    return RuleSettings(
        region_of_interest=settings.region_of_interest,
        long_term_months=settings.long_term_months,
        low_entry_threshold=settings.low_entry_threshold,
        low_entry_max_picks=settings.low_entry_max_picks,
    )
