"""
Run options: defaults, validation, YAML config files and log hooks.

Options are built once per invocation and passed down explicitly; nothing
here is mutated after import.
"""

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional

import yaml

from . import __version__
from .errors import OptionsError

STANDARDS = ("Section508", "WCAG2A", "WCAG2AA", "WCAG2AAA")
REPORT_TYPES = ("json", "csv", "html")

HTMLCS_URL = "https://squizlabs.github.io/HTML_CodeSniffer/build/HTMLCS.js"


def _noop(message: str) -> None:
    pass


@dataclass(frozen=True)
class LogHooks:
    debug: Callable[[str], None] = _noop
    info: Callable[[str], None] = _noop
    error: Callable[[str], None] = _noop


DEFAULTS: Mapping[str, Any] = MappingProxyType({
    "standard": "WCAG2AA",
    "ignore": (),
    "wait": 0,
    "htmlcs": HTMLCS_URL,
    "reporter": None,
    "outdir": None,
    "headless": True,
    "timeout": 30,
    "user_agent": f"a11yscan/{__version__}",
    "ignore_ssl_errors": True,
})


@dataclass(frozen=True)
class RunOptions:
    standard: str
    ignore: FrozenSet[str]
    wait: int
    htmlcs: str
    reporter: Optional[str]
    outdir: Optional[str]
    headless: bool
    timeout: float
    user_agent: str
    ignore_ssl_errors: bool
    log: LogHooks = field(default_factory=LogHooks)


def build_options(options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> RunOptions:
    """
    Merge ``DEFAULTS``, ``options`` and ``overrides`` (later wins) into a
    validated RunOptions. ``None`` values never override.
    """
    merged: Dict[str, Any] = dict(DEFAULTS)
    merged["log"] = LogHooks()
    for source in (options or {}, overrides):
        for key, value in source.items():
            if value is not None:
                merged[key] = value

    known = {f.name for f in fields(RunOptions)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise OptionsError("Unknown option(s): " + ", ".join(unknown))

    if merged["standard"] not in STANDARDS:
        raise OptionsError("Standard must be one of " + ", ".join(STANDARDS))
    if merged["reporter"] and merged["reporter"] not in REPORT_TYPES:
        raise OptionsError("Report type must be one of [" + ", ".join(REPORT_TYPES) + "]")
    if merged["reporter"] and not merged["outdir"]:
        raise OptionsError("Report output location must be defined")

    _check_types(merged)

    ignore = merged["ignore"]
    if isinstance(ignore, str):
        ignore = [ignore]
    merged["ignore"] = frozenset(item.lower() for item in ignore)
    merged["reporter"] = merged["reporter"] or None
    return RunOptions(**merged)


def _check_types(merged: Dict[str, Any]) -> None:
    def is_number(value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    if not is_number(merged["wait"]) or merged["wait"] < 0:
        raise OptionsError(f"wait must be a non-negative number of milliseconds, got {merged['wait']!r}")
    if not is_number(merged["timeout"]) or merged["timeout"] <= 0:
        raise OptionsError(f"timeout must be a positive number of seconds, got {merged['timeout']!r}")
    for name in ("headless", "ignore_ssl_errors"):
        if not isinstance(merged[name], bool):
            raise OptionsError(f"{name} must be true or false, got {merged[name]!r}")
    for name in ("htmlcs", "user_agent"):
        if not isinstance(merged[name], str):
            raise OptionsError(f"{name} must be a string, got {merged[name]!r}")
    if merged["outdir"] is not None and not isinstance(merged["outdir"], str):
        raise OptionsError(f"outdir must be a path, got {merged['outdir']!r}")

    ignore = merged["ignore"]
    if isinstance(ignore, str):
        return
    if not isinstance(ignore, (list, tuple, set, frozenset)) or not all(isinstance(i, str) for i in ignore):
        raise OptionsError(f"ignore must be a list of rule codes or types, got {ignore!r}")


def load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise OptionsError(f"Config file {path} is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise OptionsError(f"Config file {path} must contain a mapping")
    return data
