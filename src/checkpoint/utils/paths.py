"""Dotted-path helpers for nested message structures."""

from typing import Any

PATH_SEPARATOR = "."


def split_path(path: str) -> tuple[list[str], str]:
    """Split a dotted path into its parent segments and the final key.

    Examples:
        >>> split_path("person.address.zip")
        (['person', 'address'], 'zip')
        >>> split_path("email")
        ([], 'email')
    """
    *parents, key = path.split(PATH_SEPARATOR)
    return parents, key


def resolve_path(messages: dict[str, Any], path: str) -> Any:
    """Resolve a dotted path against an already aggregated message structure.

    A key stored verbatim (even one containing dots) wins over segment
    traversal. Unresolvable paths yield an empty dict.

    Args:
        messages: Structure as returned by ``Inspector.get_messages()``
        path: Dotted path, e.g. ``person.firstName``

    Returns:
        The message list or nested mapping found at ``path``
    """
    if path in messages:
        return messages[path]

    node: Any = messages
    for part in path.split(PATH_SEPARATOR):
        if not isinstance(node, dict) or part not in node:
            return {}
        node = node[part]
    return node


def count_messages(messages: dict[str, Any]) -> int:
    """Count the messages in a nested message structure."""
    total = 0
    for value in messages.values():
        if isinstance(value, dict):
            total += count_messages(value)
        else:
            total += len(value)
    return total


def flatten_messages(messages: dict[str, Any], prefix: str = "") -> dict[str, list[str]]:
    """Flatten a nested message structure into dotted path -> messages.

    Examples:
        >>> flatten_messages({"email": ["bad"], "person": {"name": ["blank"]}})
        {'email': ['bad'], 'person.name': ['blank']}
    """
    flat: dict[str, list[str]] = {}
    for key, value in messages.items():
        path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key
        if isinstance(value, dict):
            flat.update(flatten_messages(value, path))
        else:
            flat[path] = list(value)
    return flat
