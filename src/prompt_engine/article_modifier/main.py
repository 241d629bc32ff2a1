"""CLI entry point for article modification prompts.

Usage:
    python -m src.prompt_engine.article_modifier.main G0016169 01 article.md all --root /path/to/root
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from src.common.config import Settings, resolve_project_root
from src.common.errors import PromptEngineError
from src.common.logging import set_level, setup_logging
from src.prompt_engine.publisher.pipeline import PromptPipeline

from .models import ALL_SELECTOR, ModificationType

logger = setup_logging(module_name="article_modifier.main")

USAGE = (
    "python -m src.prompt_engine.article_modifier.main "
    "[G-ID] [コンテンツ番号] [記事ファイルパス] [修正タイプ（省略可）] [--root DIR]"
)


def _type_help() -> str:
    lines = [f"{t.value} - {t.label}" for t in ModificationType]
    lines.append(f"{ALL_SELECTOR} - 全修正プロンプト生成")
    return "; ".join(lines)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate article modification prompts")
    parser.add_argument("client_id", help="Client G-ID")
    parser.add_argument("content_number", help="Content number (e.g., 01)")
    parser.add_argument("article_path", type=Path, help="Path to the drafted article")
    parser.add_argument(
        "modification_type",
        nargs="?",
        default=ModificationType.AI_EXPRESSION_ELIMINATION.value,
        help=_type_help(),
    )
    parser.add_argument(
        "--root",
        type=Path,
        help="Project root (default: $SEO_SYSTEM_ROOT)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    try:
        settings = Settings.load(resolve_project_root(args.root))
        result = PromptPipeline.from_settings(settings).modify_article(
            args.client_id,
            args.content_number,
            args.article_path,
            args.modification_type,
        )
    except (PromptEngineError, FileNotFoundError, ValueError) as e:
        logger.error("Modification prompt generation failed: %s", e)
        logger.info("Usage: %s", USAGE)
        logger.info("Modification types: %s", _type_help())
        sys.exit(1)

    output_dir = settings.output_dir / result.output_prefix / "modification"
    print(f"\nGenerated modification prompts ({result.modification.label}): {output_dir}")


if __name__ == "__main__":
    main()
