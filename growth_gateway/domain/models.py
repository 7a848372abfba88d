"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from growth_gateway.domain.exceptions import ValidationError


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    BRL = "BRL"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SalaryInvestmentMode(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class RecommendationCategory(str, Enum):
    BEST_RATE = "best_rate"
    DIVERSIFY = "diversify"
    LONG_TERM = "long_term"
    REGIONAL_OPPORTUNITY = "regional_opportunity"
    LOW_ENTRY = "low_entry"


@dataclass(frozen=True)
class InvestmentType:
    """Investment product offered by a bank"""

    id: str
    name: str
    annual_rate: Decimal  # percent, e.g. Decimal("12.5")
    min_investment: Decimal
    risk_level: RiskLevel
    name_pt: str = ""
    monthly_rate: Optional[Decimal] = None  # percent; derived when not supplied

    def __post_init__(self) -> None:
        if self.monthly_rate is None:
            object.__setattr__(self, "monthly_rate", self.annual_rate / 12)


@dataclass(frozen=True)
class Bank:
    """Institution with its ordered product line-up"""

    id: str
    name: str
    country: str
    currency: Currency
    investment_types: Tuple[InvestmentType, ...] = ()


@dataclass(frozen=True)
class RateCatalog:
    """
    Immutable snapshot of banks and products.

    Iteration order is the order the banks were supplied in; rules that break
    ties rely on it.
    """

    banks: Tuple[Bank, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.banks

    def offerings(self) -> Iterator[Tuple[Bank, InvestmentType]]:
        """Flatten into (bank, product) pairs in catalog order"""
        for bank in self.banks:
            for product in bank.investment_types:
                yield bank, product

    def currencies(self) -> List[Currency]:
        """Distinct currencies in first-seen order"""
        seen: List[Currency] = []
        for bank in self.banks:
            if bank.currency not in seen:
                seen.append(bank.currency)
        return seen

    def for_currency(self, currency: Currency) -> "RateCatalog":
        return RateCatalog(banks=tuple(b for b in self.banks if b.currency == currency))

    def get_bank(self, bank_id: str) -> Bank:
        for bank in self.banks:
            if bank.id == bank_id:
                return bank
        raise ValidationError("bank_id", f"unknown bank '{bank_id}'")

    def get_product(self, bank_id: str, investment_type_id: str) -> InvestmentType:
        bank = self.get_bank(bank_id)
        for product in bank.investment_types:
            if product.id == investment_type_id:
                return product
        raise ValidationError(
            "investment_type_id",
            f"unknown investment type '{investment_type_id}' for bank '{bank_id}'",
        )


@dataclass(frozen=True)
class CalculationInput:
    """One investment plan as submitted by the user"""

    initial_amount: Decimal
    monthly_salary: Decimal
    salary_investment_mode: SalaryInvestmentMode
    salary_investment_value: Decimal
    duration_months: int
    bank_id: str
    investment_type_id: str
    currency: Currency

    def validate(self) -> None:
        """Raise ValidationError naming the first out-of-range field"""
        if self.duration_months < 1:
            raise ValidationError("duration_months", "must be at least 1")
        for name in ("initial_amount", "monthly_salary", "salary_investment_value"):
            if getattr(self, name) < 0:
                raise ValidationError(name, "must not be negative")
        if (
            self.salary_investment_mode == SalaryInvestmentMode.PERCENTAGE
            and self.salary_investment_value > 100
        ):
            raise ValidationError("salary_investment_value", "percentage must be within [0, 100]")

    def monthly_contribution(self) -> Decimal:
        if self.salary_investment_mode == SalaryInvestmentMode.PERCENTAGE:
            return self.monthly_salary * self.salary_investment_value / 100
        # Fixed amounts are not capped at salary; initial capital may cover the gap
        return self.salary_investment_value


@dataclass(frozen=True)
class MonthlyRecord:
    """Balance movement for a single month"""

    month: int
    contribution: Decimal
    returns: Decimal
    total: Decimal


@dataclass(frozen=True)
class YearlyRecord:
    """Aggregate of up to 12 consecutive months"""

    year: int
    total_invested: Decimal
    total_returns: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class ProjectionResult:
    """Output of the projection engine"""

    total_invested: Decimal
    total_returns: Decimal
    final_amount: Decimal
    monthly: Tuple[MonthlyRecord, ...]
    yearly: Tuple[YearlyRecord, ...]
    bank_id: str
    investment_type_id: str
    annual_rate: Decimal
    currency: Currency


@dataclass(frozen=True)
class Scenario:
    """A saved plan: the input and the projection it produced"""

    input: CalculationInput
    result: ProjectionResult
    name: str = ""


@dataclass
class Recommendation:
    """Actionable suggestion; text fields are already rendered for a locale"""

    id: str
    priority: int
    category: RecommendationCategory
    title: str
    description: str
    action_text: str
    action_target: str
    facts: Dict[str, Any] = field(default_factory=dict)
