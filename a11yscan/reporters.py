import json
from collections import Counter
from html import escape
from typing import Any, Callable, Dict, List, Optional

import pandas as pd

COLUMNS = ["type", "code", "message", "context", "selector", "typeCode"]

Reporter = Callable[[List[Dict[str, Any]], str], str]

# ----------------------------
# Formats
# ----------------------------

def json_report(entries: List[Dict[str, Any]], url: str) -> str:
    return json.dumps(entries, indent=4)


def csv_report(entries: List[Dict[str, Any]], url: str) -> str:
    df = pd.DataFrame(entries, columns=COLUMNS, dtype=object)
    return df.to_csv(index=False)


def html_report(entries: List[Dict[str, Any]], url: str) -> str:
    counts = Counter(entry.get("type") for entry in entries)
    df = pd.DataFrame(entries, columns=COLUMNS, dtype=object)
    table = df.to_html(index=False, escape=True, na_rep="", border=0, classes="results")
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Accessibility Report For "{escape(url)}"</title>
  <style>
    body {{ font-family: system-ui, Arial, sans-serif; margin: 24px; }}
    .counts span {{ margin-right: 16px; font-weight: bold; }}
    table.results {{ border-collapse: collapse; width: 100%; }}
    table.results td, table.results th {{ border-bottom: 1px solid #ccc; padding: 6px; text-align: left; vertical-align: top; }}
  </style>
</head>
<body>
  <h1>Accessibility Report For "{escape(url)}"</h1>
  <p class="counts">
    <span>{counts["error"]} errors</span>
    <span>{counts["warning"]} warnings</span>
    <span>{counts["notice"]} notices</span>
  </p>
  {table}
</body>
</html>
"""


def console_report(entries: List[Dict[str, Any]], url: str) -> str:
    lines = [f"Results for {url}:"]
    for entry in entries:
        lines.append("")
        lines.append(f" - [{entry.get('type')}] {entry.get('message')}")
        lines.append(f"   {entry.get('code')}")
        if entry.get("selector"):
            lines.append(f"   {entry['selector']}")
        if entry.get("context"):
            lines.append(f"   {entry['context']}")
    if not entries:
        lines.append("No issues found!")
    text = "\n".join(lines)
    print(text)
    return text


REPORTERS: Dict[str, Reporter] = {
    "json": json_report,
    "csv": csv_report,
    "html": html_report,
}


def get_reporter(report_type: Optional[str]) -> Reporter:
    if not report_type:
        return console_report
    return REPORTERS[report_type]
