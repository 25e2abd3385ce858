"""Role guard: decide whether the active role may open a page.

Rules:
  1. No active role -> allowed only for pages that accept anonymous visitors
  2. Active role in `disallowed` -> blocked
  3. `allowed` given and active role not in it -> blocked
  4. Blocked visitors are sent to `redirect_to`, else their role dashboard
"""

from collections.abc import Iterable
from dataclasses import dataclass

from julaaz.schema import HOME_ROUTE, RoleType, role_to_dashboard


@dataclass(frozen=True)
class GuardDecision:
    allowed: bool
    redirect_to: str | None = None


def is_role_allowed(
    active_role: RoleType,
    allowed: Iterable[RoleType] | None = None,
    disallowed: Iterable[RoleType] | None = None,
) -> bool:
    if disallowed is not None and active_role in set(disallowed):
        return False
    if allowed is not None and active_role not in set(allowed):
        return False
    return True


def resolve_guard(
    active_role: RoleType | None,
    allowed: Iterable[RoleType] | None = None,
    disallowed: Iterable[RoleType] | None = None,
    redirect_to: str | None = None,
    allow_unauthenticated: bool = False,
) -> GuardDecision:
    if active_role is None:
        return GuardDecision(allowed=allow_unauthenticated)

    if is_role_allowed(active_role, allowed, disallowed):
        return GuardDecision(allowed=True)

    target = redirect_to
    if target is None:
        target = role_to_dashboard(active_role) or HOME_ROUTE
    return GuardDecision(allowed=False, redirect_to=target)
