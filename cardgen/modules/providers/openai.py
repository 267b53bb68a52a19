"""OpenAI chat-completion provider (gpt-4o-mini list prices, USD)."""

from cardgen.modules.providers.base import ProviderProfile, TokenPricing

PROMPT_PRICE = 0.15
COMPLETION_PRICE = 0.60

OPENAI = ProviderProfile(
    name="openai",
    display_name="OpenAI",
    base_url="https://api.openai.com/v1",
    default_model="gpt-4o-mini",
    pricing=TokenPricing(
        prompt_price=PROMPT_PRICE,
        completion_price=COMPLETION_PRICE,
        currency="USD",
    ),
)
