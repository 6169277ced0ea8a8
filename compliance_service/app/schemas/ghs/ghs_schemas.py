from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from shared.core.schemas import CommonQueryParams, PageMeta, PartialUpdateModel, RequiredStr
from ...enum.ghs_enum import PrecautionaryType, SignalWord

# ---------------- GHS codes ----------------


class GHSCodeCreate(BaseModel):
    ghs_code: RequiredStr
    pictogram_url: Optional[str] = None


class GHSCodeUpdate(PartialUpdateModel):
    not_nullable = ("ghs_code",)

    ghs_code: Optional[RequiredStr] = None
    pictogram_url: Optional[str] = None


class GHSCodeOut(BaseModel):
    ghs_code_id: UUID
    ghs_code: str
    pictogram_url: Optional[str] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

# ---------------- Statements ----------------


class HazardStatementCreate(BaseModel):
    hazard_statement_code: RequiredStr
    hazard_statement_text: RequiredStr


class HazardStatementOut(BaseModel):
    hazard_statement_id: UUID
    hazard_statement_code: str
    hazard_statement_text: str

    model_config = {"from_attributes": True}


class PrecautionaryStatementCreate(BaseModel):
    code: RequiredStr
    statement: RequiredStr
    type: PrecautionaryType


class PrecautionaryStatementOut(BaseModel):
    precautionary_statement_id: UUID
    code: str
    statement: str
    type: str

    model_config = {"from_attributes": True}


class StatementRequest(CommonQueryParams):
    type: Optional[str] = None  # precautionary statements only

# ---------------- Hazard classifications ----------------


class HazardClassificationBase(BaseModel):
    hazard_class: RequiredStr
    hazard_category: RequiredStr
    ghs_code_id: Optional[UUID] = None
    hazard_statement_id: Optional[UUID] = None
    signal_word: SignalWord = SignalWord.none
    notes: Optional[str] = None
    source: Optional[str] = None


class HazardClassificationRequest(CommonQueryParams):
    signal_word: Optional[str] = None  # comma separated
    ghs_code_id: Optional[UUID] = None


class HazardClassificationCreate(HazardClassificationBase):
    pass


class HazardClassificationUpdate(PartialUpdateModel):
    not_nullable = ("hazard_class", "hazard_category", "signal_word")

    hazard_class: Optional[RequiredStr] = None
    hazard_category: Optional[RequiredStr] = None
    ghs_code_id: Optional[UUID] = None
    hazard_statement_id: Optional[UUID] = None
    signal_word: Optional[SignalWord] = None
    notes: Optional[str] = None
    source: Optional[str] = None


class HazardClassificationOut(BaseModel):
    hazard_classification_id: UUID
    hazard_class: str
    hazard_category: str
    ghs_code_id: Optional[UUID] = None
    ghs_code: Optional[str] = None
    pictogram_url: Optional[str] = None
    hazard_statement_id: Optional[UUID] = None
    hazard_statement_code: Optional[str] = None
    hazard_statement_text: Optional[str] = None
    signal_word: Optional[str] = None
    notes: Optional[str] = None
    source: Optional[str] = None
    updated_at: Optional[datetime] = None


class HazardClassificationListResponse(PageMeta):
    classifications: List[HazardClassificationOut]
