from pydantic import BaseModel, StringConstraints, model_validator
from typing import Annotated, Any, ClassVar, Dict, Generic, List, Optional, Tuple, TypeVar, Union
from uuid import UUID

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

# Shared properties
T = TypeVar("T")

# Mandatory text field: surrounding whitespace is stripped and blank is rejected
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class PartialUpdateModel(BaseModel):
    """
    Base for PUT payloads. Omitted fields are left untouched; fields named in
    `not_nullable` may be omitted but not sent as null.
    """
    not_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_cleared_required(self):
        cleared = [name for name in self.not_nullable
                   if name in self.model_fields_set and getattr(self, name) is None]
        if cleared:
            raise ValueError(f"{', '.join(cleared)} cannot be empty")
        return self


class CommonQueryParams(EmptyStringModel):
    search: Optional[str] = None
    page: int = 1
    page_size: Optional[int] = None


class ExportRequestParams(CommonQueryParams):
    """Filters accepted by every export; each export type reads the ones it knows."""
    status: Optional[str] = None
    category: Optional[str] = None
    supplier_id: Optional[str] = None
    dg_class_id: Optional[str] = None
    is_dg: Optional[str] = None
    location_id: Optional[UUID] = None
    type_id: Optional[str] = None
    approval_status_id: Optional[str] = None


class PageMeta(BaseModel):
    total: int
    page: int
    page_size: int
    total_pages: int


class Lookup(BaseModel):
    id: Union[str, int, UUID]  # accepts UUID, int and str keys
    name: str

    class Config:
        from_attributes = True


class ExportResponse(BaseModel):
    filename: str
    data: List[Dict[str, Any]]

    class Config:
        from_attributes = True


class ImportRowError(BaseModel):
    row: int
    message: str


class ImportResult(BaseModel):
    created: int = 0
    updated: int = 0
    failed: int = 0
    errors: List[ImportRowError] = []


class JsonOutResult(EmptyStringModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str
