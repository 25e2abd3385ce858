from enum import Enum


class ReportType(str, Enum):
    PROPERTY = "property"
    SERVICE_PROVIDER = "service_provider"
    TENANT = "tenant"
    LANDLORD = "landlord"
    HOMERUNNER = "homerunner"
    CUSTOMER = "customer"
    HANDYMAN = "handyman"
    ARTISAN = "artisan"
    PAYMENT = "payment"
    BEHAVIOR = "behavior"


class ReportReason(str, Enum):
    FRAUD = "fraud"
    MISREPRESENTATION = "misrepresentation"
    HARASSMENT = "harassment"
    SAFETY = "safety"
    QUALITY = "quality"
    PAYMENT = "payment"
    CONTRACT = "contract"
    OTHER = "other"


class ReportStatus(str, Enum):
    PENDING = "pending"
    INVESTIGATING = "investigating"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"
    CLOSED = "closed"
