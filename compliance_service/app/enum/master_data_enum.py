from enum import Enum


class MasterDataCategory(str, Enum):
    LOCATION_TYPE = "LOCATION_TYPE"
    STORAGE_TYPE = "STORAGE_TYPE"
    UOM = "UOM"
    HAZARD_TYPE = "HAZARD_TYPE"
    DG_CLASS = "DG_CLASS"
    PACKING_GROUP = "PACKING_GROUP"
    DG_SUBDIVISION = "DG_SUBDIVISION"
    STOCK_REASON = "STOCK_REASON"
    EVALUATION_STATUS = "EVALUATION_STATUS"
    APPROVAL_STATUS = "APPROVAL_STATUS"
