# app/models/risk_assessments/risk_reference.py
from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Likelihood(Base):
    __tablename__ = "likelihood"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False)
    score = Column(Integer, nullable=False)


class Consequence(Base):
    __tablename__ = "consequence"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False)
    score = Column(Integer, nullable=False)


class RiskMatrix(Base):
    """Precomputed risk rating for each likelihood x consequence pair."""
    __tablename__ = "risk_matrix"
    __table_args__ = (
        UniqueConstraint("likelihood_id", "consequence_id",
                         name="uq_risk_matrix_pair"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    likelihood_id = Column(Integer, ForeignKey("likelihood.id"))
    consequence_id = Column(Integer, ForeignKey("consequence.id"))
    risk_score = Column(Integer, nullable=False)
    risk_level = Column(String(32), nullable=False)
    risk_label = Column(String(64))
    risk_color = Column(String(16), nullable=False)

    likelihood = relationship("Likelihood")
    consequence = relationship("Consequence")
