# candlelens/core/units.py
from typing import Dict, Optional

UNIT_MAP: Dict[str, str] = {
    "m": "M", "min": "M", "minute": "M", "minutes": "M",
    "h": "H", "hr": "H", "hour": "H", "hours": "H",
    "d": "D", "day": "D", "days": "D",
    "w": "W", "week": "W", "weeks": "W",
    "mo": "MO", "month": "MO", "months": "MO",
}


def normalize_unit(unit: Optional[str]) -> Optional[str]:
    """Map a time-unit token ("min", "Hr", "w") to its canonical code, or None."""
    if not unit:
        return None
    return UNIT_MAP.get(unit.strip().lower())


def format_timeframe(number: Optional[str], unit: Optional[str]) -> Optional[str]:
    """Build a canonical timeframe code such as "15M" or "1MO"."""
    code = normalize_unit(unit)
    if not number or code is None:
        return None
    return f"{number}{code}"
