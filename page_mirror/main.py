#!/usr/bin/env python3
"""
Page Mirror - save a single web page for offline viewing.

Downloads the page, every stylesheet, script and image it references,
and rewrites the page to point at the local copies.

Usage:
    python main.py --project demo --target https://example.com

Output layout:
    demo/index.html
    demo/css/  demo/js/  demo/images/  demo/assets/
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

from rich.prompt import Prompt

# Add parent directory to path for imports when running as script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from page_mirror import __version__
from page_mirror.errors import MirrorError
from page_mirror.mirror import MirrorPipeline
from page_mirror.utils.constants import DEFAULT_TIMEOUT
from page_mirror.utils.log import (
    console,
    setup_logger,
    print_status,
    print_success,
    print_error,
    print_info
)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='page-mirror',
        description='Download a web page and its assets for offline viewing',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s --project demo --target https://example.com
    %(prog)s -p docs -t example.com/guide.html --timeout 10
    %(prog)s                      (prompts for project and target)
        """
    )

    parser.add_argument(
        '--project', '-p',
        type=str,
        metavar='PROJECT_NAME',
        help='Project name (folder name for downloaded files)'
    )

    parser.add_argument(
        '--target', '-t',
        type=str,
        metavar='URL',
        help='Target website URL to download'
    )

    parser.add_argument(
        '--timeout',
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f'Request timeout in seconds (default: {DEFAULT_TIMEOUT})'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        help='Also write log messages to this file'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress output except errors'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(argv)


def prompt_value(prompt: str) -> str:
    """Ask for a value on the console."""
    return Prompt.ask(prompt, console=console, default="", show_default=False).strip()


def normalize_target(url: str) -> str:
    """
    Add https:// to a target URL that has no http(s) scheme.

    Args:
        url: URL string entered by the user

    Returns:
        URL string with a scheme
    """
    url = url.strip()
    if not url.startswith(('http://', 'https://')):
        url = 'https://' + url
    return url


def print_banner() -> None:
    """Print the application banner."""
    banner = """
╔═══════════════════════════════════════════════════════════════╗
║                       PAGE MIRROR v1.0                        ║
║                Terminal Website Page Downloader               ║
╚═══════════════════════════════════════════════════════════════╝
    """
    print_status(banner, "bold cyan")


def print_summary(result) -> None:
    """
    Print the run summary.

    Args:
        result: MirrorResult object
    """
    print("\n" + "=" * 60)
    print_success("MIRROR SUMMARY")
    print("=" * 60)
    print(f"  Assets found:      {result.references_found}")
    print(f"  Assets downloaded: {result.assets_downloaded}")
    print(f"  Already fetched:   {result.skipped}")
    print(f"  Failed:            {len(result.failed)}")
    print(f"  Duration:          {result.duration_seconds:.1f} seconds")

    for failure in result.failed:
        print(f"    ❌ {failure['reference']}")

    print("=" * 60 + "\n")


async def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the page mirror.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)

    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    setup_logger(level=log_level, log_file=args.log_file)

    if not args.quiet:
        print_banner()

    project_name = args.project if args.project is not None else prompt_value("📁 Enter project name")
    target_url = args.target if args.target is not None else prompt_value("🌐 Enter target URL")

    project_name = project_name.strip()
    target_url = target_url.strip()

    if not project_name or not target_url:
        print_error("Project name and target URL are required!")
        return 1

    url = normalize_target(target_url)

    try:
        pipeline = MirrorPipeline(
            url=url,
            project_dir=project_name,
            timeout=args.timeout,
            show_progress=not args.quiet
        )

        if not args.quiet:
            print_info(f"Target: {pipeline.base_url}")
            print_info(f"Project: {project_name}")

        result = await pipeline.run()

        if not args.quiet:
            print_summary(result)

        print_success(f"Files saved to: {os.path.abspath(project_name)}")
        return 0

    except KeyboardInterrupt:
        print_error("\nDownload interrupted by user")
        return 1
    except MirrorError as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"Could not write project files: {e}")
        if args.verbose:
            console.print_exception()
        return 1


def run() -> None:
    """Entry point wrapper for running as module."""
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
