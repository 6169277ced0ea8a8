from enum import Enum


class StatusCategory(str, Enum):
    SDS = "SDS_Library"
    PRODUCT_STATUS = "PRODUCT_STATUS"
    PRODUCT_APPROVAL = "PRODUCT_APPROVAL"
    SUPPLIER = "SUPPLIER"
    LOCATION = "LOCATION"
    SITE_REGISTER = "SITE_REGISTER"


class RecordStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class SDSStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    REQUESTED = "REQUESTED"


class ApprovalStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


STATUS_SEED = {
    StatusCategory.SDS: [s.value for s in SDSStatus],
    StatusCategory.PRODUCT_STATUS: [s.value for s in RecordStatus],
    StatusCategory.PRODUCT_APPROVAL: [s.value for s in ApprovalStatus],
    StatusCategory.SUPPLIER: [s.value for s in RecordStatus],
    StatusCategory.LOCATION: [s.value for s in RecordStatus],
    StatusCategory.SITE_REGISTER: [s.value for s in RecordStatus],
}
