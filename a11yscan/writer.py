import os
import re

from .options import RunOptions


def report_filename(url: str, report_type: str) -> str:
    """Flatten the whole URL into the name so every page gets its own file."""
    name = re.sub(r"[^A-Za-z0-9._-]+", "_", url.replace("://", "_"))
    return (name or "home") + "." + report_type


def write_report(options: RunOptions, report: str, url: str) -> str:
    os.makedirs(options.outdir, exist_ok=True)
    path = os.path.join(options.outdir, report_filename(url, options.reporter))
    with open(path, "w", encoding="utf-8") as f:
        f.write(report)
    return path
