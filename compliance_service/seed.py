"""
Reference data for the compliance service.

    python -m compliance_service.seed            # reference data only
    python -m compliance_service.seed --demo 20  # plus demo suppliers and locations
"""
import argparse
import logging
import random

from faker import Faker
from sqlalchemy.orm import Session

from shared.core.database import Base, ComplianceSessionLocal, compliance_engine
from shared.core.logging_config import setup_logging
from .app.enum.master_data_enum import MasterDataCategory
from .app.enum.status_enum import STATUS_SEED, RecordStatus, StatusCategory
from .app.models import (
    GHSCode, Likelihood, Consequence, Location, MasterData, RiskMatrix, StatusLookup, Supplier)

logger = logging.getLogger(__name__)

MASTER_DATA_SEED = {
    MasterDataCategory.LOCATION_TYPE: ["Region", "District", "Site", "Building", "Room"],
    MasterDataCategory.STORAGE_TYPE: ["Flammable Cabinet", "Corrosive Cabinet", "Shelf", "Store Room", "Outdoor Compound"],
    MasterDataCategory.UOM: ["L", "mL", "kg", "g", "Unit"],
    MasterDataCategory.HAZARD_TYPE: ["Health", "Physical", "Environmental"],
    MasterDataCategory.DG_CLASS: [
        "Class 1 - Explosives", "Class 2 - Gases", "Class 3 - Flammable Liquids",
        "Class 4 - Flammable Solids", "Class 5 - Oxidizing Substances",
        "Class 6 - Toxic and Infectious Substances", "Class 7 - Radioactive Material",
        "Class 8 - Corrosive Substances", "Class 9 - Miscellaneous Dangerous Goods",
    ],
    MasterDataCategory.PACKING_GROUP: ["I", "II", "III"],
    MasterDataCategory.DG_SUBDIVISION: ["2.1", "2.2", "2.3", "4.1", "4.2", "4.3", "5.1", "5.2", "6.1", "6.2"],
    MasterDataCategory.STOCK_REASON: ["Purchase", "Usage", "Disposal", "Stocktake Adjustment"],
    MasterDataCategory.EVALUATION_STATUS: ["Acceptable", "Requires Action", "Not Acceptable"],
    MasterDataCategory.APPROVAL_STATUS: ["Pending", "Approved", "Rejected"],
}

LIKELIHOOD_SEED = [("Rare", 1), ("Unlikely", 2), ("Possible", 3), ("Likely", 4), ("Almost Certain", 5)]
CONSEQUENCE_SEED = [("Insignificant", 1), ("Minor", 2), ("Moderate", 3), ("Major", 4), ("Catastrophic", 5)]

# (upper bound of likelihood x consequence, level, colour)
RISK_BANDS = [
    (4, "Low", "#22C55E"),
    (9, "Medium", "#EAB308"),
    (16, "High", "#F97316"),
    (25, "Extreme", "#EF4444"),
]

GHS_CODE_SEED = {
    "GHS01": "Exploding bomb",
    "GHS02": "Flame",
    "GHS03": "Flame over circle",
    "GHS04": "Gas cylinder",
    "GHS05": "Corrosion",
    "GHS06": "Skull and crossbones",
    "GHS07": "Exclamation mark",
    "GHS08": "Health hazard",
    "GHS09": "Environment",
}


def risk_band(score: int):
    for upper, level, color in RISK_BANDS:
        if score <= upper:
            return level, color
    return RISK_BANDS[-1][1], RISK_BANDS[-1][2]


def seed_status_lookup(db: Session):
    for category, names in STATUS_SEED.items():
        for name in names:
            exists = db.query(StatusLookup.id).filter(
                StatusLookup.category == category.value,
                StatusLookup.status_name == name).first()
            if not exists:
                db.add(StatusLookup(category=category.value, status_name=name))


def seed_master_data(db: Session):
    for category, labels in MASTER_DATA_SEED.items():
        for order, label in enumerate(labels, start=1):
            exists = db.query(MasterData.id).filter(
                MasterData.category == category.value,
                MasterData.label == label).first()
            if not exists:
                db.add(MasterData(category=category.value, label=label,
                                  value=label, status="ACTIVE", sort_order=order))


def seed_risk_reference(db: Session):
    likelihoods = {}
    for name, score in LIKELIHOOD_SEED:
        row = db.query(Likelihood).filter(Likelihood.score == score).first()
        if not row:
            row = Likelihood(name=name, score=score)
            db.add(row)
        likelihoods[score] = row

    consequences = {}
    for name, score in CONSEQUENCE_SEED:
        row = db.query(Consequence).filter(Consequence.score == score).first()
        if not row:
            row = Consequence(name=name, score=score)
            db.add(row)
        consequences[score] = row
    db.flush()

    for l_score, likelihood in likelihoods.items():
        for c_score, consequence in consequences.items():
            exists = db.query(RiskMatrix.id).filter(
                RiskMatrix.likelihood_id == likelihood.id,
                RiskMatrix.consequence_id == consequence.id).first()
            if exists:
                continue
            score = l_score * c_score
            level, color = risk_band(score)
            db.add(RiskMatrix(
                likelihood_id=likelihood.id,
                consequence_id=consequence.id,
                risk_score=score,
                risk_level=level,
                risk_label=f"{level} ({score})",
                risk_color=color,
            ))


def seed_ghs_codes(db: Session):
    for code in GHS_CODE_SEED:
        if not db.query(GHSCode.ghs_code_id).filter(GHSCode.ghs_code == code).first():
            db.add(GHSCode(ghs_code=code, pictogram_url=f"/pictograms/{code.lower()}.png"))


def seed_reference_data(db: Session):
    """Insert any missing reference rows; running it again changes nothing."""
    try:
        seed_status_lookup(db)
        seed_master_data(db)
        seed_risk_reference(db)
        seed_ghs_codes(db)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Error seeding reference data")
        raise
    logger.info("Reference data seeded")


def seed_demo_data(db: Session, count: int = 10, seed: int = None):
    fake = Faker()
    if seed is not None:
        Faker.seed(seed)
        random.seed(seed)

    active_supplier = db.query(StatusLookup.id).filter(
        StatusLookup.category == StatusCategory.SUPPLIER.value,
        StatusLookup.status_name == RecordStatus.ACTIVE.value).scalar()
    active_location = db.query(StatusLookup.id).filter(
        StatusLookup.category == StatusCategory.LOCATION.value,
        StatusLookup.status_name == RecordStatus.ACTIVE.value).scalar()
    location_types = {
        row.label: row.id for row in db.query(MasterData).filter(
            MasterData.category == MasterDataCategory.LOCATION_TYPE.value)
    }

    try:
        for _ in range(count):
            db.add(Supplier(
                supplier_name=fake.unique.company(),
                contact_person=fake.name(),
                email=fake.company_email(),
                phone_number=fake.phone_number(),
                address=fake.address().replace("\n", ", "),
                status_id=active_supplier,
            ))

        region_name = fake.unique.state()
        region = Location(name=region_name, full_path=region_name,
                          type_id=location_types["Region"], status_id=active_location)
        db.add(region)
        db.flush()
        for _ in range(count):
            name = f"{fake.unique.city()} Site"
            db.add(Location(
                name=name,
                full_path=f"{region.full_path} > {name}",
                type_id=location_types["Site"],
                parent_location_id=region.id,
                status_id=active_location,
                coordinates={"lat": float(fake.latitude()), "lng": float(fake.longitude())},
                is_storage_location=random.choice([True, False]),
            ))
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Error seeding demo data")
        raise
    logger.info(f"Demo data seeded: {count} suppliers, {count} locations")


def main():
    parser = argparse.ArgumentParser(description="Seed compliance reference data")
    parser.add_argument("--demo", type=int, default=0,
                        help="number of demo suppliers and locations to add")
    parser.add_argument("--seed", type=int, default=None, help="random seed for demo data")
    args = parser.parse_args()

    setup_logging()
    Base.metadata.create_all(bind=compliance_engine)
    db = ComplianceSessionLocal()
    try:
        seed_reference_data(db)
        if args.demo:
            seed_demo_data(db, args.demo, args.seed)
    finally:
        db.close()


if __name__ == "__main__":
    main()
