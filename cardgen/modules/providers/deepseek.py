"""DeepSeek chat-completion provider.

Pricing reference: https://platform.deepseek.com/pricing (deepseek-chat,
CNY per million tokens).
"""

from cardgen.modules.providers.base import ProviderProfile, TokenPricing

PROMPT_PRICE = 1.0
COMPLETION_PRICE = 2.0

DEEPSEEK = ProviderProfile(
    name="deepseek",
    display_name="DeepSeek",
    base_url="https://api.deepseek.com",
    default_model="deepseek-chat",
    pricing=TokenPricing(
        prompt_price=PROMPT_PRICE,
        completion_price=COMPLETION_PRICE,
        currency="CNY",
    ),
)
