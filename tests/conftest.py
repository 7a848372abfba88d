"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from growth_gateway.api.main import create_app
from growth_gateway.api.dependencies import get_catalog
from growth_gateway.infrastructure.database.models import Base
from growth_gateway.infrastructure.database.session import get_db
from growth_gateway.domain.models import (
    Bank,
    CalculationInput,
    Currency,
    InvestmentType,
    RateCatalog,
    RiskLevel,
    SalaryInvestmentMode,
)


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_product(
    id: str,
    annual_rate: str,
    min_investment: str = "1000",
    risk_level: RiskLevel = RiskLevel.LOW,
) -> InvestmentType:
    return InvestmentType(
        id=id,
        name=f"Product {id}",
        name_pt=f"Produto {id}",
        annual_rate=Decimal(annual_rate),
        min_investment=Decimal(min_investment),
        risk_level=risk_level,
    )


@pytest.fixture
def catalog() -> RateCatalog:
    """Three-currency catalog with two banks in Brazil"""
    return RateCatalog(
        banks=(
            Bank(
                id="usbank",
                name="US Bank",
                country="United States",
                currency=Currency.USD,
                investment_types=(
                    make_product("us-savings", "4.5", min_investment="0"),
                    make_product("us-cd", "5.0", min_investment="500"),
                ),
            ),
            Bank(
                id="eubank",
                name="EU Bank",
                country="Germany",
                currency=Currency.EUR,
                investment_types=(make_product("eu-fund", "3.0", min_investment="50"),),
            ),
            Bank(
                id="nubank",
                name="Nubank",
                country="Brazil",
                currency=Currency.BRL,
                investment_types=(
                    make_product("nu-cdb", "10.0", min_investment="1"),
                    make_product("nu-box", "12.0", min_investment="100"),
                ),
            ),
            Bank(
                id="xp",
                name="XP",
                country="Brazil",
                currency=Currency.BRL,
                investment_types=(make_product("xp-lci", "14.0", min_investment="1000"),),
            ),
        )
    )


@pytest.fixture
def make_input() -> Callable[..., CalculationInput]:
    """Factory for CalculationInput with sensible defaults"""

    def _make(**overrides) -> CalculationInput:
        values = dict(
            initial_amount=Decimal("1000"),
            monthly_salary=Decimal("5000"),
            salary_investment_mode=SalaryInvestmentMode.PERCENTAGE,
            salary_investment_value=Decimal("10"),
            duration_months=12,
            bank_id="nubank",
            investment_type_id="nu-box",
            currency=Currency.BRL,
        )
        values.update(overrides)
        return CalculationInput(**values)

    return _make


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session, catalog: RateCatalog) -> TestClient:
    """Create FastAPI test client with test database and fixture catalog"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog] = lambda: catalog
    return TestClient(app)


@pytest.fixture
def plan_payload() -> dict:
    """JSON body for /v1/calculate matching the fixture catalog"""
    return {
        "initial_amount": 1000,
        "monthly_salary": 0,
        "salary_investment_type": "percentage",
        "salary_investment_value": 0,
        "duration_months": 1,
        "bank_id": "nubank",
        "investment_type_id": "nu-box",
        "currency": "BRL",
    }
