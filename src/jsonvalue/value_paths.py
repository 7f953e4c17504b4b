from __future__ import annotations

from typing import Any

from .value import JSONValue


def split_path(path: str) -> list[str]:
    if path in {"", "."}:
        return []
    parts = path.split(".")
    if any(not part for part in parts):
        raise SystemExit(f"Invalid path `{path}`. Use dotted keys like servers.0.host")
    return parts


def _is_index(part: str) -> bool:
    return part.isascii() and part.isdigit()


def lookup(root: JSONValue, path: str) -> JSONValue:
    node = root
    for part in split_path(path):
        if node.is_array() and _is_index(part):
            node = node.at(int(part))
        else:
            node = node.get(part)
    return node


def path_exists(root: JSONValue, path: str) -> bool:
    node = root
    for part in split_path(path):
        if node.is_array() and _is_index(part) and int(part) < node.size():
            node = node.at(int(part))
        elif node.contains(part):
            node = node.get(part)
        else:
            return False
    return True


def _child(node: JSONValue, part: str) -> JSONValue:
    if _is_index(part) and not node.is_object():
        return node[int(part)]
    return node[part]


def assign(root: JSONValue, path: str, value: Any) -> None:
    parts = split_path(path)
    if not parts:
        root.set(value)
        return
    node = root
    for part in parts[:-1]:
        node = _child(node, part)
    last = parts[-1]
    if _is_index(last) and not node.is_object():
        node[int(last)] = value
    else:
        node[last] = value


def remove(root: JSONValue, path: str) -> bool:
    parts = split_path(path)
    if not parts:
        raise SystemExit("Cannot delete the document root")
    parent = lookup(root, ".".join(parts[:-1]))
    last = parts[-1]
    if parent.is_array() and _is_index(last):
        index = int(last)
        if index >= parent.size():
            return False
        parent.erase(index)
        return True
    return parent.erase_key(last)
