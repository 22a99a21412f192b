"""Number formatting for cards and tables."""


def format_number(n: int | float, decimals: int = 0) -> str:
    """Format number with commas."""
    if decimals == 0:
        return f"{int(round(n)):,}"
    return f"{n:,.{decimals}f}"


def format_currency(n: int | float | None, decimals: int = 0) -> str:
    """Dollar amount, e.g. $1,250."""
    if n is None:
        return "N/A"
    return f"${format_number(n, decimals)}"


def format_compact(n: int | float) -> str:
    """Impression-style counts: 1.2M, 3.4K, 950."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return format_number(n)


def format_pct(n: float | None, decimals: int = 2) -> str:
    """Format percentage."""
    if n is None:
        return "N/A"
    return f"{n:.{decimals}f}%"
