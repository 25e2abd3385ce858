from enum import Enum


class RoleType(str, Enum):
    TENANT = "tenant"
    LANDLORD = "landlord"
    SERVICE_PROVIDER = "service_provider"
    ARTISAN = "artisan"
    PROPERTY_MANAGER = "property_manager"
    ADMIN = "admin"
    HANDYMAN = "handyman"
    HOMERUNNER = "homerunner"
    REALTOR = "realtor"
    HOTEL_MANAGER = "hotel_manager"


class RolePriority(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


HOME_ROUTE = "/"

ROLE_DASHBOARDS = {
    RoleType.TENANT: HOME_ROUTE,
    RoleType.LANDLORD: "/landlord/properties",
    RoleType.REALTOR: "/realtor/dashboard",
    RoleType.SERVICE_PROVIDER: "/handyman/dashboard",
    RoleType.ARTISAN: "/handyman/dashboard",
    RoleType.PROPERTY_MANAGER: HOME_ROUTE,
    RoleType.ADMIN: "/admin/dashboard",
    RoleType.HANDYMAN: "/handyman/dashboard",
    RoleType.HOMERUNNER: "/homerunner/dashboard",
    RoleType.HOTEL_MANAGER: "/hotel-manager/dashboard",
}


def role_to_dashboard(role: RoleType) -> str:
    return ROLE_DASHBOARDS.get(role, HOME_ROUTE)
