from enum import Enum


class JobStatus(str, Enum):
    SAVED = "SAVED"
    APPLIED = "APPLIED"
    INTERVIEW = "INTERVIEW"
    OFFER = "OFFER"
    REJECTED = "REJECTED"


class ApplicationStatus(str, Enum):
    DRAFT = "DRAFT"
    APPLIED = "APPLIED"
    INTERVIEW = "INTERVIEW"
    OA = "OA"  # online assessment
    OFFER = "OFFER"
    REJECTED = "REJECTED"


class InterviewType(str, Enum):
    PHONE_SCREEN = "PHONE_SCREEN"
    TECHNICAL = "TECHNICAL"
    BEHAVIORAL = "BEHAVIORAL"
    SYSTEM_DESIGN = "SYSTEM_DESIGN"
    CODING_CHALLENGE = "CODING_CHALLENGE"
    ONSITE = "ONSITE"
    FINAL_ROUND = "FINAL_ROUND"
    OTHER = "OTHER"


class InterviewStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    RESCHEDULED = "RESCHEDULED"


class SalaryType(str, Enum):
    ANNUAL = "ANNUAL"
    HOURLY = "HOURLY"
    MONTHLY = "MONTHLY"


class OfferStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    EXPIRED = "EXPIRED"
    NEGOTIATING = "NEGOTIATING"


class SalaryChangeType(str, Enum):
    INITIAL = "INITIAL"
    RAISE = "RAISE"
    PROMOTION = "PROMOTION"
    BONUS = "BONUS"
    ADJUSTMENT = "ADJUSTMENT"
