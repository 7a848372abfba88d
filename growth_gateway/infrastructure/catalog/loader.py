"""Product catalog loader - reads bank/product snapshots from JSON"""

import json
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from growth_gateway.domain.exceptions import CatalogError
from growth_gateway.domain.models import Bank, Currency, InvestmentType, RateCatalog, RiskLevel
from growth_gateway.utils.money import to_decimal


def _parse_investment_type(raw: Dict[str, Any]) -> InvestmentType:
    monthly_rate = raw.get("monthly_rate")
    return InvestmentType(
        id=raw["id"],
        name=raw["name"],
        name_pt=raw.get("name_pt", ""),
        annual_rate=to_decimal(raw["annual_rate"]),
        monthly_rate=to_decimal(monthly_rate) if monthly_rate is not None else None,
        min_investment=to_decimal(raw["min_investment"]),
        risk_level=RiskLevel(raw["risk_level"]),
    )


def parse_catalog(data: Dict[str, Any]) -> RateCatalog:
    """
    Build an immutable catalog from decoded JSON.

    Raises:
        CatalogError: On missing keys, unknown currencies or risk levels,
            non-numeric or negative rates
    """
    if not isinstance(data, dict):
        raise CatalogError(f"Invalid catalog data: expected an object, got {type(data).__name__}")

    try:
        banks = []
        for raw_bank in data.get("banks", []):
            investment_types = tuple(_parse_investment_type(t) for t in raw_bank.get("investment_types", []))
            for product in investment_types:
                if product.annual_rate < 0 or product.min_investment < 0 or product.monthly_rate < 0:
                    raise ValueError(f"negative rate or minimum on product {product.id}")
            banks.append(
                Bank(
                    id=raw_bank["id"],
                    name=raw_bank["name"],
                    country=raw_bank["country"],
                    currency=Currency(raw_bank["currency"]),
                    investment_types=investment_types,
                )
            )
        return RateCatalog(banks=tuple(banks))

    except (KeyError, ValueError, TypeError, AttributeError, InvalidOperation) as e:
        raise CatalogError(f"Invalid catalog data: {e}") from e


@lru_cache(maxsize=8)
def load_catalog(path: Path) -> RateCatalog:
    """
    Load and cache a catalog snapshot per file path.

    Raises:
        CatalogError: If the file is missing or malformed
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"), parse_float=Decimal)
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog file is not valid JSON: {e}") from e

    return parse_catalog(data)
