"""Print every entry of a nested mapping with its dotted path."""

from objutils import dfs


DOCUMENT = {
    "a": {"1": {"A": "I"}, "2": {"B": "II"}},
    "b": {"4": {"C": "III"}, "3": {"D": "IV"}},
}


def main() -> None:
    """Walk the document and mark leaves with ``!``."""

    def show(value: object, _key: str, path: tuple[str, ...], is_leaf: bool) -> None:
        marker = "!" if is_leaf else ""
        print(f"{'.'.join(path)} = {value}{marker}")

    dfs(DOCUMENT, show)


if __name__ == "__main__":
    main()
