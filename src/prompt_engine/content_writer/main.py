"""CLI entry point for article prompt generation.

Usage:
    python -m src.prompt_engine.content_writer.main G0016169 01 --root /path/to/seo-article-system
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

logger = setup_logging(module_name="content_writer.main")

USAGE = "python -m src.prompt_engine.content_writer.main [G-ID] [コンテンツ番号] [--root DIR]"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate article-creation prompts")
    parser.add_argument("client_id", help="Client G-ID (e.g., G1234567)")
    parser.add_argument("content_number", help="Content number (e.g., 01)")
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
        result = PromptPipeline.from_settings(settings).create_article(
            args.client_id, args.content_number
        )
    except (PromptEngineError, ValueError) as e:
        logger.error("Article prompt generation failed: %s", e)
        logger.info("Usage: %s", USAGE)
        sys.exit(1)

    output_dir = settings.output_dir / result.output_prefix
    print(f"\nGenerated {len(result.prompt_set.documents)} prompts: {output_dir}")
    for i, name in enumerate(result.prompt_set.document_names, start=1):
        print(f"  {i}. {name}")


if __name__ == "__main__":
    main()
