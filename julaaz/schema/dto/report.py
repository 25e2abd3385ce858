from dataclasses import dataclass


@dataclass
class ReportContext:
    has_viewed: bool = False
    has_moved_in: bool = False
    has_booking: bool = False
    booking_status: str | None = None


@dataclass
class ReportEligibility:
    can_report: bool
    reason: str | None = None
    requires_viewing: bool = False
    requires_move_in: bool = False
    requires_booking: bool = False

    def to_dict(self) -> dict:
        return {
            "can_report": self.can_report,
            "reason": self.reason,
            "requires_viewing": self.requires_viewing,
            "requires_move_in": self.requires_move_in,
            "requires_booking": self.requires_booking,
        }
