from typing import Any, Dict, List, Optional


def dig(payload: Any, *keys: Any) -> Any:
    """
    Safely walks nested dicts and lists; returns None at the first miss.
    Example: dig(body, "data", "boards", 0, "items_page", "cursor")
    """
    current = payload
    for key in keys:
        if isinstance(current, dict):
            current = current.get(key)
        elif isinstance(current, list) and isinstance(key, int):
            try:
                current = current[key]
            except IndexError:
                return None
        else:
            return None
        if current is None:
            return None
    return current


def get_data(payload: Dict[str, Any], field: str) -> Any:
    """
    Extracts the result of a root field from a GraphQL response body.
    Example: get_data(body, 'create_item') -> {'id': '1', 'name': 'Task'}
    """
    return dig(payload, "data", field)


def get_list(payload: Dict[str, Any], *keys: Any) -> List[Dict[str, Any]]:
    """
    Like dig(), but always returns a list of dicts.
    Raises ValueError if the value exists and is not a list.
    """
    value = dig(payload, *keys)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"Expected a list at {'.'.join(map(str, keys))}.")
    return [v for v in value if isinstance(v, dict)]


def first_error_message(payload: Dict[str, Any]) -> Optional[str]:
    """
    The human-readable message of the first GraphQL error, falling back to
    the top-level error_message used by non-GraphQL failures.
    """
    message = dig(payload, "errors", 0, "message")
    if message is not None:
        return str(message)
    message = payload.get("error_message") if payload else None
    return str(message) if message is not None else None


__all__ = ["dig", "get_data", "get_list", "first_error_message"]
