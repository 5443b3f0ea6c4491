from dataclasses import dataclass, replace


@dataclass(frozen=True)
class CartLine:
    """A pending rental selection. References the listing by id only."""

    tool_id: str
    days: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "days", max(1, self.days))

    def with_days(self, days: int) -> "CartLine":
        return replace(self, days=days)

    def extended_by(self, days: int) -> "CartLine":
        return replace(self, days=self.days + days)
