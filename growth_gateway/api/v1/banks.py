"""GET /v1/banks - Product catalog listing"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from growth_gateway.api.v1.schemas import BankSchema
from growth_gateway.api.dependencies import get_catalog
from growth_gateway.domain.models import Currency, RateCatalog

router = APIRouter()


@router.get("/banks", response_model=List[BankSchema])
def list_banks(
    currency: Optional[Currency] = Query(None, description="Only banks operating in this currency"),
    catalog: RateCatalog = Depends(get_catalog),
):
    """List banks and their investment products in catalog order."""
    if currency is not None:
        catalog = catalog.for_currency(currency)
    return [BankSchema.from_domain(bank) for bank in catalog.banks]
