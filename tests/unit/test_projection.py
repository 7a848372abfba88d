"""Unit tests for the projection engine"""

import pytest
from decimal import Decimal
from growth_gateway.domain.exceptions import ValidationError
from growth_gateway.domain.models import (
    CalculationInput,
    Currency,
    InvestmentType,
    RiskLevel,
    SalaryInvestmentMode,
)
from growth_gateway.domain.projection import (
    monthly_rate_for,
    project,
    project_from_catalog,
)

CENT = Decimal("0.01")


def make_product(id: str, annual_rate: str) -> InvestmentType:
    return InvestmentType(
        id=id,
        name=id,
        annual_rate=Decimal(annual_rate),
        min_investment=Decimal("0"),
        risk_level=RiskLevel.LOW,
    )


def test_single_month_returns():
    """1000 at 12% for one month earns exactly 10"""
    product = make_product("p", "12")

    calc_input = CalculationInput(
        initial_amount=Decimal("1000"),
        monthly_salary=Decimal("0"),
        salary_investment_mode=SalaryInvestmentMode.PERCENTAGE,
        salary_investment_value=Decimal("0"),
        duration_months=1,
        bank_id="b",
        investment_type_id="p",
        currency=Currency.USD,
    )

    result = project(calc_input, product)

    assert len(result.monthly) == 1
    assert len(result.yearly) == 1
    assert result.monthly[0].returns == Decimal("10")
    assert result.monthly[0].total == Decimal("1010")
    assert result.final_amount == Decimal("1010")
    assert result.total_invested == Decimal("1000")
    assert result.total_returns == Decimal("10")


def test_contribution_earns_return_in_same_month(make_input):
    """Contributions are added before the month's return is applied"""
    calc_input = make_input(
        initial_amount=Decimal("0"),
        salary_investment_mode=SalaryInvestmentMode.FIXED,
        salary_investment_value=Decimal("100"),
        duration_months=2,
    )

    result = project(calc_input, make_product("p", "12"))

    # Month 1: 100 -> +1.00 -> 101; month 2: 201 -> +2.01 -> 203.01
    assert result.monthly[0].contribution == Decimal("100")
    assert result.monthly[0].returns == Decimal("1")
    assert result.monthly[1].returns == Decimal("2.01")
    assert result.final_amount == Decimal("203.01")
    assert result.total_invested == Decimal("200")
    assert result.total_returns == Decimal("3.01")


def test_percentage_contribution(make_input):
    """Percentage mode invests that share of salary each month"""
    calc_input = make_input(monthly_salary=Decimal("5000"), salary_investment_value=Decimal("20"))
    assert calc_input.monthly_contribution() == Decimal("1000")

    result = project(calc_input, make_product("p", "0"))

    assert all(m.contribution == Decimal("1000") for m in result.monthly)


def test_fixed_contribution_not_capped_at_salary(make_input):
    """Fixed amounts above salary are applied as given"""
    calc_input = make_input(
        monthly_salary=Decimal("100"),
        salary_investment_mode=SalaryInvestmentMode.FIXED,
        salary_investment_value=Decimal("500"),
        duration_months=3,
    )

    result = project(calc_input, make_product("p", "0"))

    assert [m.contribution for m in result.monthly] == [Decimal("500")] * 3
    assert result.final_amount == Decimal("2500")  # 1000 initial + 3 * 500


def test_zero_inputs_produce_zero_schedule(make_input):
    """No capital and no salary means nothing ever grows"""
    calc_input = make_input(
        initial_amount=Decimal("0"),
        monthly_salary=Decimal("0"),
        duration_months=12,
    )

    result = project(calc_input, make_product("p", "12"))

    assert len(result.monthly) == 12
    assert all(m.contribution == 0 and m.returns == 0 and m.total == 0 for m in result.monthly)
    assert result.total_returns == 0
    assert result.final_amount == 0


@pytest.mark.parametrize("duration", [1, 11, 12, 13, 60, 361])
def test_totals_are_consistent(make_input, duration):
    """final == invested + returns == last monthly total == last year's ending balance"""
    result = project(make_input(duration_months=duration), make_product("p", "12.75"))

    assert abs(result.final_amount - (result.total_invested + result.total_returns)) < CENT
    assert result.monthly[-1].total == result.final_amount
    assert result.yearly[-1].ending_balance == result.final_amount
    assert abs(sum(m.returns for m in result.monthly) - result.total_returns) < CENT


def test_yearly_aggregation_with_partial_year(make_input):
    """25 months give two full years and a one-month trailing year"""
    calc_input = make_input(
        initial_amount=Decimal("1000"),
        salary_investment_mode=SalaryInvestmentMode.FIXED,
        salary_investment_value=Decimal("100"),
        duration_months=25,
    )

    result = project(calc_input, make_product("p", "6"))

    assert [y.year for y in result.yearly] == [1, 2, 3]
    # Initial amount counts towards year 1 only
    assert result.yearly[0].total_invested == Decimal("2200")
    assert result.yearly[1].total_invested == Decimal("1200")
    assert result.yearly[2].total_invested == Decimal("100")
    assert result.yearly[0].ending_balance == result.monthly[11].total
    assert result.yearly[1].ending_balance == result.monthly[23].total
    assert abs(result.yearly[1].total_returns - sum(m.returns for m in result.monthly[12:24])) < CENT
    assert sum(y.total_invested for y in result.yearly) == result.total_invested


def test_higher_rate_never_yields_less(make_input):
    """Monotonicity in the annual rate"""
    calc_input = make_input(duration_months=120)

    low = project(calc_input, make_product("low", "4"))
    high = project(calc_input, make_product("high", "4.01"))

    assert high.final_amount >= low.final_amount


def test_monthly_rate_is_simple_proportional():
    """12% annual is exactly 1% per month, not the compounding equivalent"""
    assert monthly_rate_for(make_product("p", "12")) == Decimal("0.01")


def test_result_echoes_selection(make_input):
    result = project(make_input(), make_product("nu-box", "12"))

    assert result.bank_id == "nubank"
    assert result.investment_type_id == "nu-box"
    assert result.annual_rate == Decimal("12")
    assert result.currency.value == "BRL"


def test_zero_duration_rejected(make_input):
    with pytest.raises(ValidationError) as exc_info:
        project(make_input(duration_months=0), make_product("p", "12"))
    assert exc_info.value.field == "duration_months"


def test_percentage_above_hundred_rejected(make_input):
    with pytest.raises(ValidationError) as exc_info:
        project(make_input(salary_investment_value=Decimal("150")), make_product("p", "12"))
    assert exc_info.value.field == "salary_investment_value"


@pytest.mark.parametrize("field", ["initial_amount", "monthly_salary", "salary_investment_value"])
def test_negative_money_rejected(make_input, field):
    with pytest.raises(ValidationError) as exc_info:
        project(make_input(**{field: Decimal("-1")}), make_product("p", "12"))
    assert exc_info.value.field == field


def test_fixed_mode_allows_values_above_hundred(make_input):
    calc_input = make_input(
        salary_investment_mode=SalaryInvestmentMode.FIXED,
        salary_investment_value=Decimal("150"),
    )
    result = project(calc_input, make_product("p", "12"))
    assert result.monthly[0].contribution == Decimal("150")


def test_project_from_catalog_resolves_product(make_input, catalog):
    result = project_from_catalog(make_input(bank_id="xp", investment_type_id="xp-lci"), catalog)
    assert result.annual_rate == Decimal("14.0")


def test_project_from_catalog_unknown_ids(make_input, catalog):
    with pytest.raises(ValidationError) as exc_info:
        project_from_catalog(make_input(bank_id="nope"), catalog)
    assert exc_info.value.field == "bank_id"

    with pytest.raises(ValidationError) as exc_info:
        project_from_catalog(make_input(investment_type_id="us-cd"), catalog)
    assert exc_info.value.field == "investment_type_id"
