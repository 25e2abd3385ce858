from julaaz.access import is_role_allowed, resolve_guard
from julaaz.schema import RoleType


class TestIsRoleAllowed:
    def test_no_restrictions(self):
        assert is_role_allowed(RoleType.TENANT) is True

    def test_allowed_list(self):
        allowed = [RoleType.LANDLORD, RoleType.ADMIN]
        assert is_role_allowed(RoleType.ADMIN, allowed=allowed) is True
        assert is_role_allowed(RoleType.TENANT, allowed=allowed) is False

    def test_disallowed_list(self):
        assert is_role_allowed(RoleType.ADMIN, disallowed=[RoleType.ADMIN]) is False
        assert is_role_allowed(RoleType.TENANT, disallowed=[RoleType.ADMIN]) is True

    def test_disallowed_wins_over_allowed(self):
        assert is_role_allowed(
            RoleType.ADMIN, allowed=[RoleType.ADMIN], disallowed=[RoleType.ADMIN],
        ) is False


class TestResolveGuard:
    def test_anonymous_blocked_by_default(self):
        decision = resolve_guard(None, allowed=[RoleType.TENANT])
        assert decision.allowed is False
        assert decision.redirect_to is None

    def test_anonymous_allowed_when_page_permits(self):
        assert resolve_guard(None, allow_unauthenticated=True).allowed is True

    def test_blocked_role_goes_to_its_dashboard(self):
        decision = resolve_guard(RoleType.HANDYMAN, allowed=[RoleType.LANDLORD])
        assert decision.allowed is False
        assert decision.redirect_to == "/handyman/dashboard"

    def test_explicit_redirect(self):
        decision = resolve_guard(
            RoleType.ADMIN, disallowed=[RoleType.ADMIN], redirect_to="/admin/disputes",
        )
        assert decision.redirect_to == "/admin/disputes"

    def test_tenant_falls_back_to_home(self):
        decision = resolve_guard(RoleType.TENANT, allowed=[RoleType.REALTOR])
        assert decision.redirect_to == "/"

    def test_allowed_role_passes(self):
        decision = resolve_guard(RoleType.REALTOR, allowed=[RoleType.REALTOR])
        assert decision.allowed is True
        assert decision.redirect_to is None

    def test_empty_redirect_is_kept(self):
        decision = resolve_guard(RoleType.HANDYMAN, allowed=[RoleType.LANDLORD], redirect_to="")
        assert decision.allowed is False
        assert decision.redirect_to == ""
