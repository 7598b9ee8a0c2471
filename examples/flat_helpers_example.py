"""Map, filter and reduce over a flat mapping with a shared context."""

from objutils import obj_filter, obj_map, obj_reduce


def main() -> None:
    """Apply a price multiplier and sum the affordable items."""
    prices = {"apple": 3, "pear": 5, "melon": 12}
    budget = {"multiplier": 2, "limit": 20}

    scaled = obj_map(prices, lambda ctx, price, _key, _obj: price * ctx["multiplier"], ctx=budget)
    affordable = obj_filter(scaled, lambda ctx, price, _key, _obj: price <= ctx["limit"], ctx=budget)
    total = obj_reduce(affordable, lambda acc, price, _key, _obj: acc + price, 0)

    print("scaled:", scaled)
    print("affordable:", affordable)
    print("total:", total)


if __name__ == "__main__":
    main()
