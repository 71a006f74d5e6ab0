import logging
import math
from datetime import datetime

from .. import config


def human_size(size_bytes: int) -> str:
    """Powers of 1024, one decimal place. Plain bytes have no decimals."""
    n = float(size_bytes)
    i = 0
    while n >= 1024 and i < len(config.SIZE_UNITS) - 1:
        n /= 1024
        i += 1
    if i == 0:
        return f"{size_bytes} {config.SIZE_UNITS[0]}"
    # Half-up rounding, the same as Math.round in the page script
    rounded = math.floor(n * 10 + 0.5) / 10
    return f"{rounded:.1f} {config.SIZE_UNITS[i]}"


def format_timestamp(modified_ms: int) -> str:
    try:
        return datetime.fromtimestamp(modified_ms / 1000).strftime(config.DATE_FORMAT)
    except (OverflowError, OSError, ValueError) as e:
        # Out of range for the platform; the page script formats it on load
        logging.debug(f"Cannot format timestamp {modified_ms}: {e}")
        return ''


def icon_for(preview_kind: str) -> str:
    return config.KIND_ICONS.get(preview_kind, config.FALLBACK_ICON)
