"""Prompt building for chat-completion card generation.

The system prompt fixes the output contract (a JSON array of card objects);
the user prompt carries the source text, shaped by a preset or by a custom
template supplied in ``GenerationConfig.prompt_template``.
"""

from __future__ import annotations

from dataclasses import dataclass

from cardgen.modules.cards.models import CardType, GenerationConfig

CONTENT_PLACEHOLDER = "{content}"

_TYPE_RULES = {
    CardType.QA: (
        '- "qa": a question on "front" and its answer on "back".'
    ),
    CardType.CHOICE: (
        '- "choice": a question on "front", 3-5 options in "choices", the '
        'correct option text in "correct_answer", and the answer restated on "back".'
    ),
    CardType.CLOZE: (
        '- "cloze": a sentence in "cloze_text" with the hidden part wrapped '
        'as {{c1::hidden}}; "front" shows the sentence with a blank and "back" '
        "the hidden part."
    ),
}

PRESETS = {
    "default": (
        "Create flashcards from the content below. Cover the key facts and "
        "concepts; each card tests one idea."
    ),
    "concise": (
        "Create short flashcards from the content below. Keep every front under "
        "15 words and every back under 25 words."
    ),
    "detailed": (
        "Create flashcards from the content below that build real understanding. "
        "Backs may run 2-4 sentences and should add an explanation when useful."
    ),
    "exam": (
        "Create exam-style flashcards from the content below. Favour definitions, "
        "cause and effect, and comparisons a grader would ask about."
    ),
}


@dataclass(frozen=True)
class PromptPair:
    system_prompt: str
    user_prompt: str


def build_system_prompt(config: GenerationConfig) -> str:
    types = list(dict.fromkeys(config.card_types)) or [CardType.QA]
    type_rules = "\n".join(_TYPE_RULES[t] for t in types)
    allowed = ", ".join(f'"{t.value}"' for t in types)
    return (
        "You are an expert educator who writes accurate, focused flashcards.\n"
        f"Produce exactly {config.card_count} cards.\n"
        f"Allowed card types: {allowed}.\n"
        f"{type_rules}\n"
        "Output only a JSON array, no commentary and no code fences. Each item is "
        'an object with keys "type", "front", "back" and optionally "choices", '
        '"correct_answer", "cloze_text", "tags" (short lowercase keywords) and '
        '"explanation".\n'
        "Write the cards in the language of the content."
    )


def build_user_prompt(content: str, template: str | None = None) -> str:
    """Render the user prompt from a preset name or a custom template."""
    key = (template or "").strip() or "default"
    if key in PRESETS:
        return f"{PRESETS[key]}\n\nContent:\n{content}"

    if CONTENT_PLACEHOLDER in template:
        return template.replace(CONTENT_PLACEHOLDER, content)
    return f"{template}\n\n{content}"


def build_prompts(content: str, config: GenerationConfig) -> PromptPair:
    return PromptPair(
        system_prompt=build_system_prompt(config),
        user_prompt=build_user_prompt(content, config.prompt_template),
    )
