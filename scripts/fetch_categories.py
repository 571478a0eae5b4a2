#!/usr/bin/env python3
"""
Fetch a BigCommerce store's categories and write them to JSON
"""
import sys
import os
import json
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bigcommerce_catalog.integrations.clients.mocks.local_categories import LocalCategoriesClient
from bigcommerce_catalog.integrations.clients.real_http.bigcommerce_categories import BigCommerceCategoriesClient
from bigcommerce_catalog.utils.config_loader import CatalogClientConfig, load_catalog_config

EXIT_OK = 0
EXIT_PARTIAL = 1
EXIT_MISSING_CREDENTIALS = 2


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None):
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler()]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Fetch all categories of a BigCommerce store',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Credentials from BIGCOMMERCE_STORE_CONTEXT / BIGCOMMERCE_AUTH_TOKEN (.env supported)
  python scripts/fetch_categories.py --output data/categories.json

  # Explicit store and token
  python scripts/fetch_categories.py --context stores/abc123 --token XXXX

  # Offline run against saved API pages
  python scripts/fetch_categories.py --mock-file tests/fixtures/pages.json
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to client config YAML file (default: config/catalog_config.yml)'
    )
    parser.add_argument(
        '--context',
        type=str,
        default=None,
        help='Store API context, e.g. stores/abc123 (default: $BIGCOMMERCE_STORE_CONTEXT)'
    )
    parser.add_argument(
        '--token',
        type=str,
        default=None,
        help='Store X-Auth-Token (default: $BIGCOMMERCE_AUTH_TOKEN)'
    )
    parser.add_argument(
        '--max-retries',
        type=int,
        default=None,
        help='Failed attempts tolerated per page (overrides config)'
    )
    parser.add_argument(
        '--output',
        type=Path,
        default=Path('data/categories.json'),
        help='Where to write the categories (default: data/categories.json)'
    )
    parser.add_argument(
        '--mock-file',
        type=Path,
        default=None,
        help='Serve pages from a local JSON file instead of the API'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )
    parser.add_argument(
        '--log-file',
        type=Path,
        default=None,
        help='Also write logs to this file'
    )
    return parser


def load_config_or_default(config_path: Optional[Path]) -> CatalogClientConfig:
    logger = logging.getLogger(__name__)
    try:
        return load_catalog_config(config_path)
    except FileNotFoundError as e:
        if config_path is not None:
            raise
        logger.warning(f"{e}. Using defaults.")
        return CatalogClientConfig()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    load_dotenv()
    args = build_parser().parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)
    logger = logging.getLogger(__name__)

    context = args.context or os.getenv("BIGCOMMERCE_STORE_CONTEXT", "")
    token = args.token or os.getenv("BIGCOMMERCE_AUTH_TOKEN", "")

    if args.mock_file:
        client = LocalCategoriesClient(fixture_path=args.mock_file)
        context = context or "mock"
    else:
        if not context or not token:
            logger.error("Store context and auth token are required (--context/--token or environment)")
            return EXIT_MISSING_CREDENTIALS
        client = BigCommerceCategoriesClient(config=load_config_or_default(args.config))

    logger.info("=" * 60)
    logger.info(f"Fetching categories for {context}")
    logger.info("=" * 60)

    result = client.get_all_categories(context, token, max_retries=args.max_retries)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, 'w', encoding='utf-8') as f:
        json.dump([c.to_record() for c in result.categories], f, indent=2, ensure_ascii=False)

    logger.info(f"  Categories: {len(result.categories)}")
    logger.info(f"  Pages fetched: {result.pages_fetched}")
    if result.unresolved_ids:
        logger.warning(f"  Unresolved hierarchy: {result.unresolved_ids}")
    logger.info(f"  Output: {args.output}")

    if not result.ok:
        logger.error(f"Category fetch incomplete: {result.error}")
        return EXIT_PARTIAL
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
