from toolkicker.core.domain.booking.booking import Booking, BookingLine, freeze_lines, sum_line_totals
from toolkicker.core.domain.booking.booking_status import BookingStatus

__all__ = ["Booking", "BookingLine", "BookingStatus", "freeze_lines", "sum_line_totals"]
