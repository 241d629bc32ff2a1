"""CLI entry point for order workbook setup.

Usage:
    python -m src.order_intake.excel_analyzer.main "発注書.xlsx" --root /path/to/seo-article-system
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

logger = setup_logging(module_name="excel_analyzer.main")

USAGE = 'python -m src.order_intake.excel_analyzer.main [エクセルファイルパス] [--root DIR]'


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Set up a client from an order workbook")
    parser.add_argument("excel_path", type=Path, help="Path to the order workbook (.xlsx)")
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
        result = PromptPipeline.from_settings(settings).setup(args.excel_path)
    except (PromptEngineError, FileNotFoundError, ValueError) as e:
        logger.error("Setup failed: %s", e)
        logger.info("Usage: %s", USAGE)
        sys.exit(1)

    logger.info("Client directory: %s", settings.customers_dir / result.client_id)
    print(f"\nSetup complete: {result.client_id}")
    print(f"Next: python -m src.prompt_engine.content_writer.main {result.client_id} 01")


if __name__ == "__main__":
    main()
