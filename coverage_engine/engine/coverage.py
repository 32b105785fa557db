def premium_cost_fraction(premium_cost_pct: float) -> float:
    return premium_cost_pct / 100.0


def coverage_from_premiums(active_premiums: float, premium_cost_pct: float) -> float:
    """Insured capacity funded by unexpired premiums.

    Zero cost is treated as no coverage rather than a division by zero.
    """
    cost = premium_cost_fraction(premium_cost_pct)
    if cost <= 0:
        return 0.0
    return active_premiums / cost
