from typing import Any, Optional

from . import dom

INNER_LIMIT = 31
OUTER_LIMIT = 251
OUTER_KEEP = 250
ELLIPSIS = "..."


def extract_context(element: Any) -> Optional[str]:
    """
    Return a bounded snippet of the element's markup, or None without markup.

    Inner content past 31 characters is elided in place so the opening and
    closing tags stay intact; anything still over 251 characters is cut at
    250.
    """
    outer_html = dom.get(element, "outerHTML")
    if not outer_html:
        return None
    outer_html = str(outer_html)
    if len(outer_html) <= INNER_LIMIT:
        return outer_html

    inner_html = str(dom.get(element, "innerHTML", ""))
    if len(inner_html) > INNER_LIMIT:
        outer_html = outer_html.replace(inner_html, inner_html[:INNER_LIMIT] + ELLIPSIS, 1)
    if len(outer_html) > OUTER_LIMIT:
        outer_html = outer_html[:OUTER_KEEP] + ELLIPSIS
    return outer_html
