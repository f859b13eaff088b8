"""
Command line entry point: run the clipper pipeline without the HTTP server.
"""

import sys
import json
import asyncio
import argparse
from typing import Optional

from dotenv import load_dotenv

from clipper.config import config
from clipper.core.services import ClipperServices
from clipper.utils.error_handling import ClipperError
from clipper.utils.logger import logging


async def fetch_info(services: ClipperServices, url: str) -> dict:
    info = await services.downloader.get_video_info(url)
    return info.model_dump(by_alias=True)


async def analyze(services: ClipperServices, url: str) -> dict:
    result = await services.analyzer.analyze(url)
    return result.model_dump()


async def clip(
    services: ClipperServices, url: str, start: float, duration: float, name: Optional[str]
) -> dict:
    result = await services.clip_cutter.create_clip(url, start, duration, name)
    return result.model_dump(by_alias=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="YouTube Clipper AI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    info_parser = subparsers.add_parser("info", help="Show video metadata")
    info_parser.add_argument("url", help="Video URL")

    analyze_parser = subparsers.add_parser("analyze", help="Transcribe and suggest highlights")
    analyze_parser.add_argument("url", help="Video URL")

    clip_parser = subparsers.add_parser("clip", help="Cut a clip into the downloads directory")
    clip_parser.add_argument("url", help="Video URL")
    clip_parser.add_argument("--start", type=float, required=True, help="Start offset in seconds")
    clip_parser.add_argument("--duration", type=float, required=True, help="Clip length in seconds")
    clip_parser.add_argument("--name", default=None, help="Clip name used for the filename")

    return parser


def main(argv=None) -> int:
    """Main function to run the application from command line."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    config.initialize()
    services = ClipperServices(config)

    if args.command == "info":
        job = fetch_info(services, args.url)
    elif args.command == "analyze":
        job = analyze(services, args.url)
    else:
        job = clip(services, args.url, args.start, args.duration, args.name)

    try:
        output = asyncio.run(job)
    except ClipperError as e:
        logging.error(f"{args.command} failed: {e.message}")
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
