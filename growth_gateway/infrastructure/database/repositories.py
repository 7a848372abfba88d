"""Data access layer for saved scenarios"""

import uuid
from decimal import Decimal
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from growth_gateway.infrastructure.database.models import SavedScenario
from growth_gateway.domain.models import (
    CalculationInput,
    Currency,
    MonthlyRecord,
    ProjectionResult,
    SalaryInvestmentMode,
    Scenario,
    YearlyRecord,
)

# Decimals are stored as strings so no precision is lost in JSON


def input_to_json(calc_input: CalculationInput) -> Dict[str, Any]:
    return {
        "initial_amount": str(calc_input.initial_amount),
        "monthly_salary": str(calc_input.monthly_salary),
        "salary_investment_type": calc_input.salary_investment_mode.value,
        "salary_investment_value": str(calc_input.salary_investment_value),
        "duration_months": calc_input.duration_months,
        "bank_id": calc_input.bank_id,
        "investment_type_id": calc_input.investment_type_id,
        "currency": calc_input.currency.value,
    }


def input_from_json(data: Dict[str, Any]) -> CalculationInput:
    return CalculationInput(
        initial_amount=Decimal(data["initial_amount"]),
        monthly_salary=Decimal(data["monthly_salary"]),
        salary_investment_mode=SalaryInvestmentMode(data["salary_investment_type"]),
        salary_investment_value=Decimal(data["salary_investment_value"]),
        duration_months=int(data["duration_months"]),
        bank_id=data["bank_id"],
        investment_type_id=data["investment_type_id"],
        currency=Currency(data["currency"]),
    )


def result_to_json(result: ProjectionResult) -> Dict[str, Any]:
    return {
        "total_invested": str(result.total_invested),
        "total_returns": str(result.total_returns),
        "final_amount": str(result.final_amount),
        "bank_id": result.bank_id,
        "investment_type_id": result.investment_type_id,
        "annual_rate": str(result.annual_rate),
        "currency": result.currency.value,
        "monthly": [
            [m.month, str(m.contribution), str(m.returns), str(m.total)]
            for m in result.monthly
        ],
        "yearly": [
            [y.year, str(y.total_invested), str(y.total_returns), str(y.ending_balance)]
            for y in result.yearly
        ],
    }


def result_from_json(data: Dict[str, Any]) -> ProjectionResult:
    return ProjectionResult(
        total_invested=Decimal(data["total_invested"]),
        total_returns=Decimal(data["total_returns"]),
        final_amount=Decimal(data["final_amount"]),
        monthly=tuple(
            MonthlyRecord(month, Decimal(contribution), Decimal(returns), Decimal(total))
            for month, contribution, returns, total in data["monthly"]
        ),
        yearly=tuple(
            YearlyRecord(year, Decimal(invested), Decimal(returns), Decimal(ending))
            for year, invested, returns, ending in data["yearly"]
        ),
        bank_id=data["bank_id"],
        investment_type_id=data["investment_type_id"],
        annual_rate=Decimal(data["annual_rate"]),
        currency=Currency(data["currency"]),
    )


class ScenarioRepository:
    """Repository for saved scenarios"""

    def __init__(self, db: Session):
        self.db = db

    def create_scenario(self, user_id: str, scenario: Scenario) -> SavedScenario:
        """Persist a scenario (flushed, not committed)"""
        db_scenario = SavedScenario(
            user_id=user_id,
            name=scenario.name,
            input_data=input_to_json(scenario.input),
            result=result_to_json(scenario.result),
        )
        self.db.add(db_scenario)
        self.db.flush()  # Get ID without committing
        return db_scenario

    def list_scenarios(self, user_id: str, limit: int = 50) -> List[SavedScenario]:
        """Fetch a user's scenarios, newest first"""
        return (
            self.db.query(SavedScenario)
            .filter(SavedScenario.user_id == user_id)
            .order_by(SavedScenario.created_at.desc())
            .limit(limit)
            .all()
        )

    def get_scenario(self, user_id: str, scenario_id: uuid.UUID) -> Optional[SavedScenario]:
        return (
            self.db.query(SavedScenario)
            .filter(SavedScenario.id == scenario_id, SavedScenario.user_id == user_id)
            .first()
        )

    def delete_scenario(self, user_id: str, scenario_id: uuid.UUID) -> bool:
        """Delete a user's scenario; False when it does not exist"""
        db_scenario = self.get_scenario(user_id, scenario_id)
        if db_scenario is None:
            return False
        self.db.delete(db_scenario)
        self.db.flush()
        return True

    def load_history(self, user_id: str) -> List[Scenario]:
        """Rebuild every saved scenario of a user for the recommendation engine"""
        rows = (
            self.db.query(SavedScenario)
            .filter(SavedScenario.user_id == user_id)
            .order_by(SavedScenario.created_at.desc())
            .all()
        )
        return [
            Scenario(
                input=input_from_json(row.input_data),
                result=result_from_json(row.result),
                name=row.name,
            )
            for row in rows
        ]
