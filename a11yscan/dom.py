"""
Element references as handed over by the rules engine.

A node is either a mapping (what Selenium returns from ``execute_script``)
or any object exposing the DOM property names as attributes. Only the fields
below are ever read: id, nodeType, tagName, parentNode, childNodes,
innerHTML, outerHTML.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional

ELEMENT_NODE = 1


def get(node: Any, name: str, default: Any = None) -> Any:
    if node is None:
        return default
    if isinstance(node, Mapping):
        value = node.get(name, default)
    else:
        value = getattr(node, name, default)
    return default if value is None else value


def is_element(node: Any) -> bool:
    return get(node, "nodeType") == ELEMENT_NODE


def from_snapshot(snapshot: Any) -> Optional[Dict[str, Any]]:
    """
    Rebuild a linked element reference from an in-page snapshot.

    Every level of the snapshot may carry ``index``, its position in
    ``parentNode.childNodes``. The child list in the snapshot holds a
    placeholder at that position; the rebuilt parent holds the element
    itself so siblings can be compared by identity.
    """
    if not isinstance(snapshot, Mapping):
        return None

    root = _copy_level(snapshot)
    current, source = root, snapshot
    while isinstance(source.get("parentNode"), Mapping):
        parent_source = source["parentNode"]
        parent = _copy_level(parent_source)
        index = source.get("index")
        children = parent.get("childNodes")
        if isinstance(index, int) and children is not None and 0 <= index < len(children):
            children[index] = current
        current["parentNode"] = parent
        current, source = parent, parent_source
    return root


def _copy_level(level: Mapping) -> Dict[str, Any]:
    node = {k: v for k, v in level.items() if k not in ("parentNode", "childNodes", "index")}
    children = level.get("childNodes")
    if children is not None:
        node["childNodes"] = [dict(c) if isinstance(c, Mapping) else c for c in children]
    return node
