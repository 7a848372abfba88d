"""Per-locale display text for recommendations"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict

from growth_gateway.domain.models import RecommendationCategory

DEFAULT_LOCALE = "en"


@dataclass(frozen=True)
class LocalizedText:
    title: str
    description: str
    action_text: str


# Templates are str.format strings filled from the facts a rule computed
TEMPLATES: Dict[str, Dict[RecommendationCategory, LocalizedText]] = {
    "en": {
        RecommendationCategory.BEST_RATE: LocalizedText(
            "Highest Return Available",
            "{bank} offers {rate}% annual return on {product}. "
            "This is the best rate across all banks.",
            "Calculate Returns",
        ),
        RecommendationCategory.DIVERSIFY: LocalizedText(
            "Diversify Your Portfolio",
            "Consider spreading investments across {currencies} "
            "to reduce currency risk and maximize opportunities.",
            "View Live Rates",
        ),
        RecommendationCategory.LONG_TERM: LocalizedText(
            "Think Long-Term",
            "Compound interest works best over {years}+ years. "
            "Extend your investment horizon to see exponential growth.",
            "Calculate {years}-Year Plan",
        ),
        RecommendationCategory.REGIONAL_OPPORTUNITY: LocalizedText(
            "{region} Market Opportunity",
            "Banks in {region} average {average_rate}% returns. "
            "Higher rates available with {banks}.",
            "Explore Options",
        ),
        RecommendationCategory.LOW_ENTRY: LocalizedText(
            "Start with Small Investments",
            "{banks} allow investments starting from {currency} {minimum}.",
            "Get Started",
        ),
    },
    "pt": {
        RecommendationCategory.BEST_RATE: LocalizedText(
            "Maior Retorno Disponível",
            "{bank} oferece {rate}% de retorno anual em {product_pt}. "
            "Esta é a melhor taxa entre todos os bancos.",
            "Calcular Retornos",
        ),
        RecommendationCategory.DIVERSIFY: LocalizedText(
            "Diversifique Seu Portfólio",
            "Considere distribuir investimentos em {currencies} "
            "para reduzir risco cambial e maximizar oportunidades.",
            "Ver Taxas ao Vivo",
        ),
        RecommendationCategory.LONG_TERM: LocalizedText(
            "Pense a Longo Prazo",
            "Juros compostos funcionam melhor em {years}+ anos. "
            "Estenda seu horizonte de investimento para ver crescimento exponencial.",
            "Calcular Plano de {years} Anos",
        ),
        RecommendationCategory.REGIONAL_OPPORTUNITY: LocalizedText(
            "Oportunidade no Mercado: {region}",
            "Bancos em {region} oferecem média de {average_rate}% de retorno. "
            "Taxas maiores disponíveis com {banks}.",
            "Explorar Opções",
        ),
        RecommendationCategory.LOW_ENTRY: LocalizedText(
            "Comece com Pequenos Investimentos",
            "{banks} permitem investimentos a partir de {currency} {minimum}.",
            "Começar",
        ),
    },
}


# Facts shown with one decimal place instead of as-is
ONE_DECIMAL_FACTS = {"average_rate"}


def _display_value(key: str, value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    if isinstance(value, Decimal) and key in ONE_DECIMAL_FACTS:
        return format(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP), "f")
    if isinstance(value, Decimal):
        # Drop trailing zeros: 12.50 -> 12.5, 100.00 -> 100
        normalized = value.normalize()
        return format(normalized, "f")
    return value


def render(category: RecommendationCategory, locale: str, facts: Dict[str, Any]) -> LocalizedText:
    """Fill the locale's templates from rule facts; unknown locales fall back to English"""
    templates = TEMPLATES.get(locale, TEMPLATES[DEFAULT_LOCALE])
    template = templates[category]
    values = {key: _display_value(key, value) for key, value in facts.items()}
    return LocalizedText(
        title=template.title.format(**values),
        description=template.description.format(**values),
        action_text=template.action_text.format(**values),
    )
