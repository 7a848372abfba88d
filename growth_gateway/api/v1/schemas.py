"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from typing import Annotated, List

from pydantic import BaseModel, Field, PlainSerializer

from growth_gateway.domain.models import (
    Bank,
    CalculationInput,
    Currency,
    ProjectionResult,
    Recommendation,
    RiskLevel,
    SalaryInvestmentMode,
)
from growth_gateway.utils.money import to_money

# Rounded to cents only when written out as JSON
Money = Annotated[Decimal, PlainSerializer(lambda v: float(to_money(v)), return_type=float, when_used="json")]
# Written out as JSON numbers, unrounded
Number = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Every month is returned in the breakdown, so the horizon is capped at 100 years
MAX_DURATION_MONTHS = 1200


class CalculationRequest(BaseModel):
    """Request body for POST /v1/calculate and POST /v1/recommendations"""

    initial_amount: Number = Field(..., ge=0, description="Capital invested at month 0")
    monthly_salary: Number = Field(..., ge=0, description="Gross monthly salary")
    salary_investment_type: SalaryInvestmentMode = Field(..., description="percentage | fixed")
    salary_investment_value: Number = Field(..., ge=0, description="Percent of salary or fixed amount per month")
    duration_months: int = Field(..., ge=1, le=MAX_DURATION_MONTHS, description="Projection horizon in months")
    bank_id: str = Field(..., min_length=1)
    investment_type_id: str = Field(..., min_length=1)
    currency: Currency

    def to_domain(self) -> CalculationInput:
        return CalculationInput(
            initial_amount=self.initial_amount,
            monthly_salary=self.monthly_salary,
            salary_investment_mode=self.salary_investment_type,
            salary_investment_value=self.salary_investment_value,
            duration_months=self.duration_months,
            bank_id=self.bank_id,
            investment_type_id=self.investment_type_id,
            currency=self.currency,
        )

    @classmethod
    def from_domain(cls, calc_input: CalculationInput) -> "CalculationRequest":
        return cls(
            initial_amount=calc_input.initial_amount,
            monthly_salary=calc_input.monthly_salary,
            salary_investment_type=calc_input.salary_investment_mode,
            salary_investment_value=calc_input.salary_investment_value,
            duration_months=calc_input.duration_months,
            bank_id=calc_input.bank_id,
            investment_type_id=calc_input.investment_type_id,
            currency=calc_input.currency,
        )


class MonthlyBreakdownSchema(BaseModel):
    """Single month of a projection"""

    month: int
    investment: Money
    returns: Money
    total: Money


class YearlyBreakdownSchema(BaseModel):
    """Single year of a projection"""

    year: int
    total_invested: Money
    total_returns: Money
    ending_balance: Money


class CalculationResponse(BaseModel):
    """Response for POST /v1/calculate"""

    total_invested: Money
    total_returns: Money
    final_amount: Money
    monthly_breakdown: List[MonthlyBreakdownSchema]
    yearly_breakdown: List[YearlyBreakdownSchema]
    bank_id: str
    investment_type_id: str
    annual_rate: Number
    currency: Currency

    @classmethod
    def from_result(cls, result: ProjectionResult) -> "CalculationResponse":
        return cls(
            total_invested=result.total_invested,
            total_returns=result.total_returns,
            final_amount=result.final_amount,
            monthly_breakdown=[
                MonthlyBreakdownSchema(
                    month=m.month,
                    investment=m.contribution,
                    returns=m.returns,
                    total=m.total,
                )
                for m in result.monthly
            ],
            yearly_breakdown=[
                YearlyBreakdownSchema(
                    year=y.year,
                    total_invested=y.total_invested,
                    total_returns=y.total_returns,
                    ending_balance=y.ending_balance,
                )
                for y in result.yearly
            ],
            bank_id=result.bank_id,
            investment_type_id=result.investment_type_id,
            annual_rate=result.annual_rate,
            currency=result.currency,
        )


class InvestmentTypeSchema(BaseModel):
    """Product listing entry"""

    id: str
    name: str
    name_pt: str
    annual_rate: Number
    monthly_rate: Number
    min_investment: Money
    risk_level: RiskLevel


class BankSchema(BaseModel):
    """Response item for GET /v1/banks"""

    id: str
    name: str
    country: str
    currency: Currency
    investment_types: List[InvestmentTypeSchema]

    @classmethod
    def from_domain(cls, bank: Bank) -> "BankSchema":
        return cls(
            id=bank.id,
            name=bank.name,
            country=bank.country,
            currency=bank.currency,
            investment_types=[
                InvestmentTypeSchema(
                    id=t.id,
                    name=t.name,
                    name_pt=t.name_pt,
                    annual_rate=t.annual_rate,
                    monthly_rate=t.monthly_rate,
                    min_investment=t.min_investment,
                    risk_level=t.risk_level,
                )
                for t in bank.investment_types
            ],
        )


class RecommendationSchema(BaseModel):
    """Single entry of POST /v1/recommendations"""

    id: str
    title: str
    description: str
    category: str
    priority: int
    action_text: str
    action_hint: str

    @classmethod
    def from_domain(cls, rec: Recommendation) -> "RecommendationSchema":
        return cls(
            id=rec.id,
            title=rec.title,
            description=rec.description,
            category=rec.category.value,
            priority=rec.priority,
            action_text=rec.action_text,
            action_hint=rec.action_target,
        )


class ScenarioCreateRequest(BaseModel):
    """Request body for POST /v1/scenarios"""

    name: str = Field(..., min_length=1, max_length=200)
    input_data: CalculationRequest


class ScenarioResponse(BaseModel):
    """Saved scenario with its projection"""

    scenario_id: str
    name: str
    input_data: CalculationRequest
    result: CalculationResponse
    created_at: str


class ScenarioListResponse(BaseModel):
    """Response for GET /v1/scenarios"""

    user_id: str
    scenarios: List[ScenarioResponse]
