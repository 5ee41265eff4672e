"""
Formatting helpers for the text examples print.

Numbers and money are rendered the same way in every example so output
stays stable across runs and platforms.
"""


def format_number(value: float) -> str:
    """
    Format a float using its shortest round-trip form.

    Integral values print without a decimal part.

    Examples:
        >>> format_number(400.0)
        '400'
        >>> format_number(9.0)
        '9'
        >>> format_number(12.566370614359172)
        '12.566370614359172'
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_cents(cents: int) -> str:
    """
    Format an amount in cents as dollars.

    Examples:
        >>> format_cents(17998)
        '$179.98'
        >>> format_cents(5)
        '$0.05'
    """
    return f"${cents // 100}.{cents % 100:02d}"


__all__ = ["format_number", "format_cents"]
