from typing import AbstractSet, Any, Optional

TYPE_NAMES = {
    1: "error",
    2: "warning",
    3: "notice",
}


def classify(type_code: Any) -> str:
    # bool is an int subclass; True must not read as an error
    if isinstance(type_code, bool) or not isinstance(type_code, int):
        return "unknown"
    return TYPE_NAMES.get(type_code, "unknown")


def is_ignored(code: Optional[str], type_name: str, ignore: AbstractSet[str]) -> bool:
    """Ignore entries are lower-cased already; only the code needs folding."""
    return str(code or "").lower() in ignore or type_name in ignore
