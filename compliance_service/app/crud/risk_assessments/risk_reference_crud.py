# app/crud/risk_assessments/risk_reference_crud.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ...models.risk_assessments.risk_reference import Consequence, Likelihood, RiskMatrix
from ...schemas.risk_assessments.risk_assessments_schemas import (
    ConsequenceOut, LikelihoodOut, RiskMatrixOut, RiskScoreOut)

logger = logging.getLogger(__name__)


def get_likelihoods(db: Session) -> List[LikelihoodOut]:
    rows = db.query(Likelihood).order_by(Likelihood.score.asc()).all()
    return [LikelihoodOut.model_validate(r) for r in rows]


def get_consequences(db: Session) -> List[ConsequenceOut]:
    rows = db.query(Consequence).order_by(Consequence.score.asc()).all()
    return [ConsequenceOut.model_validate(r) for r in rows]


def get_risk_matrix(db: Session) -> List[RiskMatrixOut]:
    rows = db.query(RiskMatrix).order_by(RiskMatrix.risk_score.asc(), RiskMatrix.id.asc()).all()
    return [RiskMatrixOut.model_validate(r) for r in rows]


def find_risk_score(db: Session, likelihood_id: Optional[int], consequence_id: Optional[int]) -> Optional[RiskMatrix]:
    """The matrix row matching both keys, or None when either is missing or unmatched."""
    if likelihood_id is None or consequence_id is None:
        return None
    return db.query(RiskMatrix).filter(
        RiskMatrix.likelihood_id == likelihood_id,
        RiskMatrix.consequence_id == consequence_id,
    ).first()


def lookup_risk_score(db: Session, likelihood_id: int, consequence_id: int) -> RiskScoreOut:
    matrix = find_risk_score(db, likelihood_id, consequence_id)
    if not matrix:
        logger.info(f"No risk matrix entry for likelihood {likelihood_id} / consequence {consequence_id}")
        return RiskScoreOut(likelihood_id=likelihood_id, consequence_id=consequence_id)

    return RiskScoreOut(
        likelihood_id=likelihood_id,
        consequence_id=consequence_id,
        found=True,
        risk_score_id=matrix.id,
        risk_score=matrix.risk_score,
        risk_level=matrix.risk_level,
        risk_label=matrix.risk_label,
        risk_color=matrix.risk_color,
    )


def resolve_risk_fields(db: Session, likelihood_id: Optional[int], consequence_id: Optional[int]) -> dict:
    """
    Denormalized risk columns for a likelihood / consequence pair.

    Keys are unprefixed (likelihood_text, consequence_text, risk_score_id,
    risk_score_int, risk_level_text). A lookup miss leaves the score keys None.
    """
    likelihood = db.get(Likelihood, likelihood_id) if likelihood_id is not None else None
    consequence = db.get(Consequence, consequence_id) if consequence_id is not None else None
    matrix = find_risk_score(db, likelihood_id, consequence_id)

    return {
        "likelihood_text": likelihood.name if likelihood else None,
        "consequence_text": consequence.name if consequence else None,
        "risk_score_id": matrix.id if matrix else None,
        "risk_score_int": matrix.risk_score if matrix else None,
        "risk_level_text": matrix.risk_level if matrix else None,
    }
