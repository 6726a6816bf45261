UNITS = ("B", "KB", "MB", "GB", "TB")


def format_size(num_bytes: int | float | None) -> str:
    """Human readable size with up to two decimals, e.g. ``1.5 KB``."""
    if not num_bytes or num_bytes <= 0:
        return "0 B"
    value = float(num_bytes)
    unit = 0
    while value >= 1024 and unit < len(UNITS) - 1:
        value /= 1024
        unit += 1
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {UNITS[unit]}"
