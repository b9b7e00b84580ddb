"""
main.py — command-line entry point.

  python main.py photo.jpg              annotate with Google Vision, then analyse
  python main.py --response saved.json  analyse a saved images:annotate response
  add --json for machine-readable output

Exit codes: 0 success, 1 analysis failed, 2 bad arguments.
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import config
import style
from image_analyzer import analyse_image, analyse_payload
from providers.base import (
    ConfigurationError,
    ExternalServiceError,
    parse_annotate_response,
    parse_json_response,
)
from resolvers.brand_resolver import BrandThresholds

logging.basicConfig(
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    handlers=[logging.StreamHandler(sys.stderr)],
)
logging.getLogger("aiohttp.access").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Propose type, category, pattern, colour and brand for a clothing photo.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("image", nargs="?", type=Path, help="photo to analyse")
    source.add_argument("--response", type=Path, help="saved Vision images:annotate JSON")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    return parser


async def run(args: argparse.Namespace):
    if args.response is not None:
        raw = args.response.read_text(encoding="utf-8")
        payload = parse_annotate_response(
            parse_json_response(raw, str(args.response)), str(args.response),
        )
        return analyse_payload(payload, thresholds=BrandThresholds.from_config())
    return await analyse_image(args.image.read_bytes())


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        result = asyncio.run(run(args))
    except (ConfigurationError, ExternalServiceError, ValueError, OSError) as exc:
        logger.error("Analysis failed: %s", exc)
        if args.json:
            print(json.dumps({"error": str(exc)}))
        else:
            print(style.error_card(exc))
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(style.result_card(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
