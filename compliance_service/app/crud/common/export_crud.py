# app/crud/common/export_crud.py
import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from shared.core.schemas import ExportRequestParams, ExportResponse
from shared.exporthelper import export_to_excel
from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from ...schemas.locations.locations_schemas import LocationRequest
from ...schemas.master_data.master_data_schemas import MasterDataRequest
from ...schemas.products.products_schemas import ProductRequest
from ...schemas.risk_assessments.risk_assessments_schemas import RiskAssessmentRequest
from ...schemas.sds.sds_schemas import SDSRequest
from ...schemas.site_registers.site_registers_schemas import SiteRegisterRequest
from ...schemas.suppliers.suppliers_schemas import SupplierRequest
from ..locations import locations_crud
from ..master_data import master_data_crud
from ..products import products_crud
from ..risk_assessments import risk_assessments_crud
from ..sds import sds_crud
from ..site_registers import site_registers_crud
from ..suppliers import suppliers_crud

logger = logging.getLogger(__name__)

EXPORT_TYPES = (
    "products", "sds", "suppliers", "locations",
    "site_registers", "master_data", "risk_assessments",
)


def _request(model, params: ExportRequestParams):
    """Carry over the export filters the module request understands."""
    data = params.model_dump(include=set(model.model_fields))
    return model(**data)


def get_export_data(db: Session, type: str, params: ExportRequestParams) -> ExportResponse:

    if type == "products":
        export_data = products_crud.get_products(
            db, _request(ProductRequest, params), is_export=True)
        data = [row.model_dump(mode="json") for row in export_data.products]
        column_map = {
            "product_name": "Product Name",
            "product_code": "Product Code",
            "brand_name": "Brand",
            "supplier_name": "Supplier",
            "uom": "UOM",
            "unit_size": "Unit Size",
            "is_dg": "Dangerous Goods",
            "dg_class": "DG Class",
            "packing_group": "Packing Group",
            "status": "Status",
            "approval_status": "Approval Status",
        }
    elif type == "sds":
        export_data = sds_crud.get_sds_list(
            db, _request(SDSRequest, params), is_export=True)
        data = [row.model_dump(mode="json") for row in export_data.sds]
        column_map = {
            "product_name": "Product Name",
            "product_id": "Product Code",
            "supplier_name": "Supplier",
            "is_dg": "Dangerous Goods",
            "dg_class": "DG Class",
            "packing_group": "Packing Group",
            "un_number": "UN Number",
            "issue_date": "Issue Date",
            "expiry_date": "Expiry Date",
            "status": "Status",
        }
    elif type == "suppliers":
        export_data = suppliers_crud.get_suppliers(
            db, _request(SupplierRequest, params), is_export=True)
        data = [row.model_dump(mode="json") for row in export_data.suppliers]
        column_map = {
            "supplier_name": "Supplier Name",
            "contact_person": "Contact Person",
            "email": "Email",
            "phone_number": "Phone",
            "address": "Address",
            "status": "Status",
        }
    elif type == "locations":
        export_data = locations_crud.get_locations(
            db, _request(LocationRequest, params), is_export=True)
        data = [row.model_dump(mode="json") for row in export_data.locations]
        column_map = {
            "name": "Location Name",
            "full_path": "Full Path",
            "type_name": "Type",
            "parent_name": "Parent Location",
            "is_storage_location": "Storage Location",
            "storage_type_name": "Storage Type",
            "status": "Status",
        }
    elif type == "site_registers":
        export_data = site_registers_crud.get_site_registers(
            db, _request(SiteRegisterRequest, params), is_export=True)
        data = [row.model_dump(mode="json") for row in export_data.site_registers]
        column_map = {
            "product_name": "Product",
            "product_code": "Product Code",
            "location_path": "Location",
            "exact_location": "Exact Location",
            "current_stock_level": "Current Stock",
            "max_stock_level": "Max Stock",
            "uom": "UOM",
            "is_dg": "Dangerous Goods",
            "status": "Status",
        }
    elif type == "master_data":
        export_data = master_data_crud.get_master_data(
            db, _request(MasterDataRequest, params), is_export=True)
        data = [row.model_dump(mode="json") for row in export_data.master_data]
        column_map = {
            "category": "Category",
            "label": "Label",
            "value": "Value",
            "sort_order": "Sort Order",
            "status": "Status",
        }
    elif type == "risk_assessments":
        export_data = risk_assessments_crud.get_risk_assessments(
            db, _request(RiskAssessmentRequest, params), is_export=True)
        data = [row.model_dump(mode="json") for row in export_data.risk_assessments]
        column_map = {
            "product_name": "Product",
            "location_path": "Location",
            "risk_assessment_date": "Assessment Date",
            "date_of_next_review": "Next Review",
            "conducted_by_name": "Conducted By",
            "overall_risk_level_text": "Risk Level",
            "overall_risk_score_int": "Risk Score",
            "evaluation_status": "Evaluation Status",
            "approval_status": "Approval Status",
        }
    else:
        return error_response(
            message=f"Unknown export type: {type}",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=400
        )

    filename = f"{type}_export_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}.xlsx"
    logger.info(f"Exporting {len(data)} {type} rows")
    return export_to_excel(data, filename, column_map)
