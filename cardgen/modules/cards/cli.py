from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from cardgen.core.logging import get_logger
from cardgen.modules.cards.main import CardsGenerator
from cardgen.modules.cards.models import GenerationConfig, GenerationProgress
from cardgen.modules.providers import PROFILES, UnknownProviderError

logger = get_logger("cardgen.cli")


def _load_content(args: argparse.Namespace) -> str:
    if args.content and args.content_file:
        raise SystemExit("Provide either --content or --content-file, not both")
    if args.content_file:
        return Path(args.content_file).read_text(encoding="utf-8")
    if args.content:
        return args.content
    raise SystemExit("--content or --content-file is required")


def _log_progress(p: GenerationProgress) -> None:
    logger.info("[%s %3.0f%%] %s", p.status.value, p.progress, p.message)


def _add_provider(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--provider",
        choices=sorted(PROFILES),
        help="Provider name (default: MODEL_PROVIDER)",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cards-gen", description="AI flashcard generator CLI"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate flashcards from source text")
    g.add_argument("--content", "-c", help="Source text")
    g.add_argument("--content-file", help="Path to a file containing the source text")
    g.add_argument("--count", "-n", type=int, default=5, help="Number of cards")
    g.add_argument("--temperature", type=float, default=0.7)
    g.add_argument("--max-tokens", type=int, default=2000)
    g.add_argument(
        "--template",
        help="Preset name (default, concise, detailed, exam) or custom text with {content}",
    )
    _add_provider(g)

    t = sub.add_parser("test-connection", help="Check the provider API key and endpoint")
    _add_provider(t)

    e = sub.add_parser("estimate-cost", help="Estimate cost for a token count")
    e.add_argument("prompt_tokens", type=int)
    e.add_argument("completion_tokens", type=int)
    _add_provider(e)

    args = parser.parse_args(argv)
    try:
        svc = CardsGenerator(args.provider)
    except UnknownProviderError as exc:
        raise SystemExit(f"Unknown provider: {exc}") from exc

    if args.cmd == "generate":
        content = _load_content(args)
        config = GenerationConfig(
            card_count=args.count,
            temperature=args.temperature,
            max_tokens=args.max_tokens,
            prompt_template=args.template,
        )
        result = svc.generate_sync(content, config, on_progress=_log_progress)
        print(json.dumps(svc.to_jsonable(result), indent=2, ensure_ascii=False))
        return 0 if result.success else 1
    if args.cmd == "test-connection":
        ok = asyncio.run(svc.test_connection())
        print(json.dumps({"provider": svc.provider, "ok": ok}))
        return 0 if ok else 1
    if args.cmd == "estimate-cost":
        cost = svc.estimate_cost(args.prompt_tokens, args.completion_tokens)
        print(
            json.dumps(
                {"provider": svc.provider, "estimated_cost": cost, "currency": svc.currency}
            )
        )
        return 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
