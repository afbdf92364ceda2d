"""
Command line entry point.

    a11yscan --urls https://example.com,https://example.com/about --reporter csv --outdir reports
    a11yscan --urls-json '["https://example.com"]' --ignore notice --standard WCAG2A
    a11yscan --file urls.txt --config a11yscan.yaml
"""

import argparse
import json
import sys
from typing import List, Optional

from selenium.common.exceptions import WebDriverException

from .errors import OptionsError
from .options import REPORT_TYPES, STANDARDS, LogHooks, build_options, load_config
from .reporters import get_reporter
from .selenium_runner import scan_urls
from .writer import write_report

# -------------------
# Utilities
# -------------------

def parse_urls(urls_arg: Optional[str], urls_json: Optional[str], file_arg: Optional[str]) -> List[str]:
    """Collect URLs from every source given; the first occurrence of a URL wins."""
    candidates: List[str] = []
    if urls_arg:
        candidates += urls_arg.split(",")
    if urls_json:
        candidates += _json_urls(urls_json)
    if file_arg:
        candidates += _file_urls(file_arg)
    cleaned = (str(candidate).strip() for candidate in candidates)
    return list(dict.fromkeys(url for url in cleaned if url))


def _json_urls(text: str) -> List[str]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise OptionsError(f"Invalid JSON in --urls-json: {e}") from e
    if not isinstance(data, list):
        raise OptionsError("--urls-json must be a JSON array")
    return data


def _file_urls(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line for line in f if not line.lstrip().startswith("#")]


def make_log(verbose: bool) -> LogHooks:
    def debug(message: str) -> None:
        if verbose:
            print(f"[DEBUG] {message}")

    def info(message: str) -> None:
        print(f"[A11Y] {message}")

    def error(message: str) -> None:
        sys.stderr.write(f"[ERROR] {message}\n")

    return LogHooks(debug=debug, info=info, error=error)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="a11yscan", description="Accessibility audit of web pages with HTML_CodeSniffer")
    parser.add_argument("--urls", help="Comma-separated URLs")
    parser.add_argument("--urls-json", help="JSON array of URLs")
    parser.add_argument("--file", help="File with URLs (one per line)")
    parser.add_argument("--config", help="YAML file with run options")
    parser.add_argument("--standard", choices=STANDARDS)
    parser.add_argument("--ignore", nargs="*", help="Rule codes or types (error, warning, notice) to leave out")
    parser.add_argument("--reporter", choices=REPORT_TYPES)
    parser.add_argument("--outdir", help="Directory the reports are written to")
    parser.add_argument("--wait", type=int, help="Milliseconds to wait after page load")
    parser.add_argument("--htmlcs", help="Path or URL of the HTML_CodeSniffer build")
    parser.add_argument("--timeout", type=float, help="Script timeout in seconds")
    parser.add_argument("--no-headless", dest="headless", action="store_false", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser

# -------------------
# Main
# -------------------

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        urls = parse_urls(args.urls, args.urls_json, args.file)
        config = load_config(args.config) if args.config else {}
        options = build_options(
            config,
            standard=args.standard,
            ignore=args.ignore,
            reporter=args.reporter,
            outdir=args.outdir,
            wait=args.wait,
            htmlcs=args.htmlcs,
            timeout=args.timeout,
            headless=args.headless,
            log=make_log(args.verbose),
        )
    except (OptionsError, OSError) as e:
        sys.stderr.write(f"[ERROR] {e}\n")
        return 2

    if not urls:
        print("No URLs provided, exiting.")
        return 2

    print(f"URLs to test: {len(urls)}")
    reporter = get_reporter(options.reporter)
    try:
        results = scan_urls(urls, options)
    except WebDriverException as e:
        sys.stderr.write(f"[ERROR] Could not start the browser: {e.msg or e}\n")
        return 1
    for result in results:
        if not result.ok:
            continue
        report = reporter(result.entries, result.url)
        if options.outdir and options.reporter:
            path = write_report(options, report, result.url)
            print(f"[DONE] Report for {result.url} written to {path}")

    failed = [r.url for r in results if not r.ok]
    if failed:
        sys.stderr.write(f"[ERROR] {len(failed)} of {len(results)} page(s) failed\n")
        return 1
    print("All scans completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
