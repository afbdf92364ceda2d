from collections.abc import Mapping
from typing import Any, Dict, Iterable, List

from . import dom
from .classifier import classify, is_ignored
from .context import extract_context
from .selector import synthesize


def process(options: Any, raw_violations: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    Turn raw rules-engine messages into report entries.

    ``options`` is a RunOptions or any mapping with an ``ignore`` key holding
    lower-cased codes and type names. Entries keep the input order; ignored
    messages are dropped.
    """
    ignore = _ignore_set(options)
    entries: List[Dict[str, Any]] = []
    for raw in raw_violations:
        type_code = dom.get(raw, "type")
        type_name = classify(type_code)
        code = dom.get(raw, "code")
        if is_ignored(code, type_name, ignore):
            continue
        element = dom.get(raw, "element")
        entries.append({
            "code": code,
            "context": extract_context(element),
            "message": dom.get(raw, "msg"),
            "selector": synthesize(element),
            "type": type_name,
            "typeCode": type_code,
        })
    return entries


def _ignore_set(options: Any) -> frozenset:
    if isinstance(options, Mapping):
        ignore = options.get("ignore")
    else:
        ignore = getattr(options, "ignore", None)
    return frozenset(ignore or ())
