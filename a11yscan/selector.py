from typing import Any, List

from . import dom

# Upper bound on the ancestor walk; a real DOM is far shallower.
MAX_DEPTH = 512


def synthesize(element: Any) -> str:
    """
    Build a CSS selector for ``element`` by walking up its ancestors.

    The walk stops at the first node carrying an id. Nodes without an id
    contribute their lower-cased tag name, suffixed with ``:nth-child(N)``
    when an element sibling shares the same tag.
    """
    parts: List[str] = []
    node = element
    depth = 0
    while dom.is_element(node) and depth < MAX_DEPTH:
        node_id = dom.get(node, "id")
        if node_id:
            parts.append("#" + str(node_id))
            break
        part = _tag_part(node)
        if part:
            parts.append(part)
        node = dom.get(node, "parentNode")
        depth += 1
    return " > ".join(reversed(parts))


def _tag_part(node: Any) -> str:
    tag = _tag_name(node)
    if not tag:
        return ""
    parent = dom.get(node, "parentNode")
    if parent is None:
        return tag

    siblings = [child for child in dom.get(parent, "childNodes", ()) if dom.is_element(child)]
    position = _position(node, siblings)
    if position is None:
        return tag
    if any(child is not node and _tag_name(child) == tag for child in siblings):
        return "%s:nth-child(%d)" % (tag, position + 1)
    return tag


def _tag_name(node: Any) -> str:
    return str(dom.get(node, "tagName", "")).lower()


def _position(node: Any, siblings: List[Any]):
    for index, sibling in enumerate(siblings):
        if sibling is node:
            return index
    return None
