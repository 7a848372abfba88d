"""Recommendation engine - ordered rule table over catalog and saved plans"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from growth_gateway.domain.messages import DEFAULT_LOCALE, render
from growth_gateway.domain.models import (
    RateCatalog,
    Recommendation,
    RecommendationCategory,
    Scenario,
)


@dataclass(frozen=True)
class RuleSettings:
    """Thresholds the rules compare against"""

    region_of_interest: str = "Brazil"
    long_term_months: int = 60
    low_entry_threshold: Decimal = Decimal(100)
    low_entry_max_picks: int = 3


@dataclass
class RuleOutcome:
    """What a rule found; rendered into a Recommendation by the engine"""

    id: str
    priority: int
    category: RecommendationCategory
    action_target: str
    facts: Dict[str, Any] = field(default_factory=dict)


Rule = Callable[[RateCatalog, Sequence[Scenario], RuleSettings], Optional[RuleOutcome]]


def best_rate_rule(
    catalog: RateCatalog, history: Sequence[Scenario], settings: RuleSettings
) -> Optional[RuleOutcome]:
    """Highest annual rate in the catalog; first offering wins a tie"""
    best = None
    for bank, product in catalog.offerings():
        # Strict comparison keeps the earliest of equal rates
        if best is None or product.annual_rate > best[1].annual_rate:
            best = (bank, product)

    if best is None:
        return None

    bank, product = best
    return RuleOutcome(
        id="best-rate",
        priority=1,
        category=RecommendationCategory.BEST_RATE,
        action_target=f"calculator?bank_id={bank.id}&investment_type_id={product.id}",
        facts={
            "bank": bank.name,
            "bank_id": bank.id,
            "product": product.name,
            "product_pt": product.name_pt or product.name,
            "investment_type_id": product.id,
            "rate": product.annual_rate,
        },
    )


def diversify_rule(
    catalog: RateCatalog, history: Sequence[Scenario], settings: RuleSettings
) -> Optional[RuleOutcome]:
    """Spread across currencies when the catalog offers at least two"""
    currencies = [c.value for c in catalog.currencies()]
    if len(currencies) < 2:
        return None

    return RuleOutcome(
        id="diversify",
        priority=2,
        category=RecommendationCategory.DIVERSIFY,
        action_target="live-rates",
        facts={"currencies": currencies},
    )


def long_term_rule(
    catalog: RateCatalog, history: Sequence[Scenario], settings: RuleSettings
) -> Optional[RuleOutcome]:
    """Nudge towards longer horizons until the user has saved one"""
    if any(s.input.duration_months >= settings.long_term_months for s in history):
        return None

    return RuleOutcome(
        id="long-term",
        priority=3,
        category=RecommendationCategory.LONG_TERM,
        action_target="calculator",
        facts={
            "months": settings.long_term_months,
            "years": settings.long_term_months // 12,
        },
    )


def regional_opportunity_rule(
    catalog: RateCatalog, history: Sequence[Scenario], settings: RuleSettings
) -> Optional[RuleOutcome]:
    """
    Highlight banks in the region of interest.

    average_rate is a mean of means: each bank's average product rate, then
    the average across those banks. Banks listing no products are left out
    of the mean but still count as present in the region.
    """
    regional = [b for b in catalog.banks if b.country == settings.region_of_interest]
    if not regional:
        return None

    bank_means = [
        sum((p.annual_rate for p in bank.investment_types), Decimal(0)) / len(bank.investment_types)
        for bank in regional
        if bank.investment_types
    ]
    average_rate = sum(bank_means, Decimal(0)) / len(bank_means) if bank_means else Decimal(0)

    return RuleOutcome(
        id="regional-opportunity",
        priority=4,
        category=RecommendationCategory.REGIONAL_OPPORTUNITY,
        action_target="calculator",
        facts={
            "region": settings.region_of_interest,
            "banks": [b.name for b in regional],
            "average_rate": average_rate,
        },
    )


def low_entry_rule(
    catalog: RateCatalog, history: Sequence[Scenario], settings: RuleSettings
) -> Optional[RuleOutcome]:
    """Products with a low minimum investment, first few in catalog order"""
    picks = [
        (bank, product)
        for bank, product in catalog.offerings()
        if product.min_investment <= settings.low_entry_threshold
    ][: settings.low_entry_max_picks]

    if not picks:
        return None

    cheapest_bank, cheapest = min(picks, key=lambda pair: pair[1].min_investment)
    return RuleOutcome(
        id="start-small",
        priority=5,
        category=RecommendationCategory.LOW_ENTRY,
        action_target="calculator",
        facts={
            "banks": [bank.name for bank, _ in picks],
            "minimum": cheapest.min_investment,
            "currency": cheapest_bank.currency.value,
        },
    )


# Evaluation order is fixed; new rules are appended here
RULES: Tuple[Rule, ...] = (
    best_rate_rule,
    diversify_rule,
    long_term_rule,
    regional_opportunity_rule,
    low_entry_rule,
)


def evaluate_rules(
    catalog: RateCatalog,
    history: Sequence[Scenario],
    settings: RuleSettings,
    rules: Sequence[Rule] = RULES,
) -> List[RuleOutcome]:
    """Run every rule in order and sort the hits by ascending priority"""
    outcomes = []
    for rule in rules:
        outcome = rule(catalog, history, settings)
        if outcome is not None:
            outcomes.append(outcome)

    # sorted() is stable, so equal priorities keep rule order
    return sorted(outcomes, key=lambda o: o.priority)


def recommend(
    catalog: RateCatalog,
    history: Sequence[Scenario],
    locale: str = DEFAULT_LOCALE,
    settings: RuleSettings | None = None,
) -> List[Recommendation]:
    """
    Main entry point: derive ranked recommendations.

    An empty catalog yields an empty list, since there is nothing to act on.
    Text is rendered for the requested locale; rule logic never sees it.
    """
    if catalog.is_empty:
        return []

    settings = settings or RuleSettings()
    recommendations = []
    for outcome in evaluate_rules(catalog, history, settings):
        text = render(outcome.category, locale, outcome.facts)
        recommendations.append(
            Recommendation(
                id=outcome.id,
                priority=outcome.priority,
                category=outcome.category,
                title=text.title,
                description=text.description,
                action_text=text.action_text,
                action_target=outcome.action_target,
                facts=outcome.facts,
            )
        )
    return recommendations
