import math
import re
from dataclasses import dataclass

# Longest numeric prefix, after optional leading whitespace: "12abc" -> 12, "1,5" -> 1.
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


@dataclass(frozen=True)
class ListingQuery:
    """Browse filters exactly as typed by the user.

    Price bounds stay raw strings and are read by their leading number;
    an empty bound, or one with no leading number, means "no constraint"
    on that side.
    """

    text: str = ""
    category: str = ""
    min_price: str = ""
    max_price: str = ""

    @property
    def normalized_text(self) -> str:
        return self.text.strip().casefold()

    @property
    def lower_bound(self) -> float:
        return parse_bound(self.min_price, default=-math.inf)

    @property
    def upper_bound(self) -> float:
        return parse_bound(self.max_price, default=math.inf)


def parse_bound(raw: str | float | None, *, default: float) -> float:
    if raw is None:
        return default
    if isinstance(raw, str):
        match = _LEADING_NUMBER.match(raw)
        if match is None:
            return default
        value = float(match.group(1).replace("Infinity", "inf"))
    else:
        value = float(raw)
    return default if math.isnan(value) else value
