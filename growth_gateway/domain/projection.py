"""Projection engine - compound growth with monthly contributions"""

from decimal import Decimal, localcontext
from typing import List

from growth_gateway.domain.models import (
    CalculationInput,
    InvestmentType,
    MonthlyRecord,
    ProjectionResult,
    RateCatalog,
    YearlyRecord,
)

MONTHS_PER_YEAR = 12

# Enough significant digits that hundreds of months never lose a cent
PRECISION = 34


def monthly_rate_for(product: InvestmentType) -> Decimal:
    """
    Per-month fractional rate using the simple proportional convention.

    annual_rate / 100 / 12, not (1 + annual)^(1/12) - 1. This matches the
    monthly_rate shown in the catalog, so monthly and yearly figures agree.
    """
    return product.annual_rate / 100 / MONTHS_PER_YEAR


def aggregate_years(initial_amount: Decimal, monthly: List[MonthlyRecord]) -> List[YearlyRecord]:
    """
    Group months into blocks of 12; a trailing partial year is still emitted.

    The initial amount counts as invested in year 1 only.
    """
    yearly = []
    for start in range(0, len(monthly), MONTHS_PER_YEAR):
        block = monthly[start : start + MONTHS_PER_YEAR]
        year = start // MONTHS_PER_YEAR + 1

        invested = sum((m.contribution for m in block), Decimal(0))
        if year == 1:
            invested += initial_amount

        yearly.append(
            YearlyRecord(
                year=year,
                total_invested=invested,
                total_returns=sum((m.returns for m in block), Decimal(0)),
                ending_balance=block[-1].total,
            )
        )
    return yearly


def project(calc_input: CalculationInput, product: InvestmentType) -> ProjectionResult:
    """
    Simulate the plan month by month.

    Contributions are made at the start of each month and earn that month's
    return. No rounding happens here; callers round at presentation time.

    Raises:
        ValidationError: duration < 1, negative money fields, or a percentage
            outside [0, 100]
    """
    calc_input.validate()

    with localcontext() as ctx:
        ctx.prec = PRECISION

        rate = monthly_rate_for(product)
        contribution = calc_input.monthly_contribution()
        balance = calc_input.initial_amount

        monthly = []
        for month in range(1, calc_input.duration_months + 1):
            balance += contribution
            month_return = balance * rate
            balance += month_return
            monthly.append(
                MonthlyRecord(
                    month=month,
                    contribution=contribution,
                    returns=month_return,
                    total=balance,
                )
            )

        total_invested = calc_input.initial_amount + contribution * calc_input.duration_months
        yearly = aggregate_years(calc_input.initial_amount, monthly)

        return ProjectionResult(
            total_invested=total_invested,
            total_returns=balance - total_invested,
            final_amount=balance,
            monthly=tuple(monthly),
            yearly=tuple(yearly),
            bank_id=calc_input.bank_id,
            investment_type_id=product.id,
            annual_rate=product.annual_rate,
            currency=calc_input.currency,
        )


def project_from_catalog(calc_input: CalculationInput, catalog: RateCatalog) -> ProjectionResult:
    """
    Main entry point: validate input, resolve the selected product, project.

    Unknown bank or product ids raise ValidationError before any computation.
    """
    calc_input.validate()
    product = catalog.get_product(calc_input.bank_id, calc_input.investment_type_id)
    return project(calc_input, product)
