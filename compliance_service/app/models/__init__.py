# Import all models to ensure they are registered with SQLAlchemy
from .master_data.status_lookup import StatusLookup
from .master_data.master_data import MasterData
from .suppliers.suppliers import Supplier
from .locations.locations import Location
from .sds.sds import SDS
from .sds.sds_versions import SDSVersion
from .sds.sds_ghs_classifications import SDSGHSClassification
from .sds.sds_precautionary_statements import SDSPrecautionaryStatement
from .products.products import Product
from .products.hazards_and_controls import HazardAndControl
from .site_registers.site_registers import SiteRegister
from .site_registers.stock_movements import StockMovement
from .risk_assessments.risk_reference import Likelihood, Consequence, RiskMatrix
from .risk_assessments.risk_assessments import RiskAssessment
from .risk_assessments.risk_hazards_and_controls import RiskHazardAndControl
from .ghs.ghs_codes import GHSCode
from .ghs.statements import HazardStatement, PrecautionaryStatement
from .ghs.ghs_hazard_classifications import GHSHazardClassification
from .users.users import User, Role, user_roles
from .system.system_settings import SystemSettings
