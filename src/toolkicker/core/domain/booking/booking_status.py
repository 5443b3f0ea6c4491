from enum import StrEnum, auto


class BookingStatus(StrEnum):
    REQUESTED = auto()
    CONFIRMED = auto()
    COMPLETED = auto()
