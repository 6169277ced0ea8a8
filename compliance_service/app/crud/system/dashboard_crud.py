# app/crud/system/dashboard_crud.py
from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models.locations.locations import Location
from ...models.products.products import Product
from ...models.risk_assessments.risk_assessments import RiskAssessment
from ...models.site_registers.site_registers import SiteRegister
from ...models.suppliers.suppliers import Supplier
from ...schemas.system.system_settings_schemas import DashboardOverview
from ..sds.sds_crud import get_sds_overview


def get_dashboard_overview(db: Session) -> DashboardOverview:
    sds = get_sds_overview(db)
    return DashboardOverview(
        products=db.query(func.count(Product.id)).scalar() or 0,
        suppliers=db.query(func.count(Supplier.id)).scalar() or 0,
        locations=db.query(func.count(Location.id)).scalar() or 0,
        site_registers=db.query(func.count(SiteRegister.id)).scalar() or 0,
        risk_assessments=db.query(func.count(RiskAssessment.id)).scalar() or 0,
        active_sds=sds.active,
        expired_sds=sds.expired,
        expiring_sds=sds.expiring_soon,
        requested_sds=sds.requested,
    )
