"""Report eligibility and reference numbers.

Rules:
  1. Admins never file reports (disputes page handles them)
  2. A tenant reporting a property must have viewed it or moved in
  3. Everything else is allowed
"""

import random
from datetime import date

from julaaz.schema import ReportContext, ReportEligibility, ReportType, RoleType

ADMIN_REASON = "Admins cannot submit reports. Use the disputes page to resolve issues."
PROPERTY_REASON = "You can only report a property after viewing or moving in."

ROLE_REPORT_TYPES = {
    "tenant": ReportType.TENANT,
    "landlord": ReportType.LANDLORD,
    "homerunner": ReportType.HOMERUNNER,
    "service_provider": ReportType.SERVICE_PROVIDER,
    "handyman": ReportType.HANDYMAN,
    "artisan": ReportType.ARTISAN,
}


def check_report_eligibility(
    reporter_role: RoleType | None,
    report_type: ReportType,
    context: ReportContext | None = None,
) -> ReportEligibility:
    if reporter_role == RoleType.ADMIN:
        return ReportEligibility(can_report=False, reason=ADMIN_REASON)

    if report_type == ReportType.PROPERTY and reporter_role == RoleType.TENANT:
        ctx = context or ReportContext()
        if not ctx.has_viewed and not ctx.has_moved_in:
            return ReportEligibility(
                can_report=False,
                reason=PROPERTY_REASON,
                requires_viewing=True,
                requires_move_in=True,
            )

    return ReportEligibility(can_report=True)


def get_report_type(entity_type: str, entity_role: str | None = None) -> ReportType:
    if entity_type == "property":
        return ReportType.PROPERTY
    if entity_type == "service":
        return ReportType.SERVICE_PROVIDER
    if entity_role:
        return ROLE_REPORT_TYPES.get(entity_role, ReportType.BEHAVIOR)
    return ReportType.BEHAVIOR


def generate_report_reference(today: date | None = None, rng: random.Random | None = None) -> str:
    year = (today or date.today()).year
    number = (rng or random).randrange(10000)
    return f"REP-{year}-{number:04d}"
