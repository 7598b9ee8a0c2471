"""Normalize keys and scale values in place with dfs_mod."""

from typing import Any

from objutils import dfs_mod, obj_for_each_sorted


def main() -> None:
    """Lower-case every key and double every ``value`` entry."""
    settings: dict[str, Any] = {"Alpha": {"Value": 1}, "Beta": {"Value": 2, "Label": "b"}}

    def normalize(value: Any, key: str, parent: dict[str, Any], _path: tuple[str, ...], _is_leaf: bool) -> None:
        new_key = key.lower()
        if new_key != key:
            del parent[key]
            parent[new_key] = value
        if new_key == "value":
            parent[new_key] = value * 2

    dfs_mod(settings, normalize)
    print(f"{settings=}")

    obj_for_each_sorted(settings, lambda entry, key, _obj: print(key, entry), lambda a, b: (a < b) - (a > b))


if __name__ == "__main__":
    main()
