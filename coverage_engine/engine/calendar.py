START_YEAR = 2026
START_MONTH = 4


def month_label(month_index: int, start_year: int = START_YEAR, start_month: int = START_MONTH) -> str:
    """Short `YY-M` label for the n-th simulated month (index 0 = start month)."""
    absolute = start_month - 1 + month_index
    year = start_year + absolute // 12
    month = absolute % 12 + 1
    return f"{str(year)[-2:]}-{month}"
