# app/crud/users/users_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, selectinload

from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.helpers.pagination_helper import paginate, split_filter
from shared.utils.app_status_code import AppStatusCode
from ...models.locations.locations import Location
from ...models.risk_assessments.risk_assessments import RiskAssessment
from ...models.users.users import Role, User
from ...schemas.users.users_schemas import (
    RoleCreate, RoleOut, UserCreate, UserListResponse, UserOut, UserRequest, UserUpdate)

logger = logging.getLogger(__name__)


def _full_name(user: User) -> str:
    return f"{user.first_name} {user.last_name}".strip()


def user_to_out(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        full_name=_full_name(user),
        phone_number=user.phone_number,
        active=user.active,
        manager_id=user.manager_id,
        manager_name=_full_name(user.manager) if user.manager else None,
        location_id=user.location_id,
        location_name=user.location.full_path if user.location else None,
        last_login_date=user.last_login_date,
        roles=[RoleOut.model_validate(r) for r in user.roles],
        created_at=user.created_at,
    )

# ----------------- Build Filters for Users -----------------


def build_user_filters(params: UserRequest):
    filters = []

    statuses = [s.lower() for s in split_filter(params.active)]
    if statuses:
        filters.append(User.active.in_(statuses))

    if params.role_id:
        filters.append(User.roles.any(Role.id == params.role_id))

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                User.first_name.ilike(search_term),
                User.last_name.ilike(search_term),
                User.email.ilike(search_term),
                User.phone_number.ilike(search_term),
            )
        )
    return filters


def get_users(db: Session, params: UserRequest) -> UserListResponse:
    query = (
        db.query(User)
        .options(selectinload(User.roles))
        .filter(*build_user_filters(params))
        .order_by(User.first_name.asc(), User.last_name.asc())
    )
    rows, meta = paginate(query, params.page, params.page_size)
    return UserListResponse(users=[user_to_out(u) for u in rows], **meta)


def get_user_by_id(db: Session, user_id: UUID) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()


def get_user(db: Session, user_id: UUID) -> UserOut:
    user = get_user_by_id(db, user_id)
    if not user:
        return not_found_response("User")
    return user_to_out(user)


def manager_lookup(db: Session, exclude_id: Optional[UUID] = None) -> List[Lookup]:
    query = db.query(User.id, User.first_name, User.last_name).filter(User.active == "active")
    if exclude_id:
        query = query.filter(User.id != exclude_id)
    rows = query.order_by(User.first_name.asc(), User.last_name.asc()).all()
    return [Lookup(id=r.id, name=f"{r.first_name} {r.last_name}") for r in rows]


def _load_roles(db: Session, role_ids: List[UUID]) -> List[Role]:
    roles = db.query(Role).filter(Role.id.in_(role_ids)).all() if role_ids else []
    if len(roles) != len(set(role_ids)):
        return not_found_response("Role")
    return roles


def _validate_references(db: Session, data: dict, user_id: Optional[UUID] = None):
    manager_id = data.get("manager_id")
    if manager_id:
        if user_id and manager_id == user_id:
            return error_response(
                message="A user cannot be their own manager",
                status_code=AppStatusCode.INVALID_INPUT,
                http_status=400
            )
        if not get_user_by_id(db, manager_id):
            return not_found_response("Manager")
    if data.get("location_id") and not db.get(Location, data["location_id"]):
        return not_found_response("Location")


def create_user(db: Session, user: UserCreate) -> UserOut:
    if get_user_by_email(db, user.email):
        return error_response(
            message="User with this email already exists",
            status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
            http_status=409
        )

    data = user.model_dump(exclude={"role_ids"})
    data["email"] = data["email"].lower()
    _validate_references(db, data)

    db_user = User(**data)
    db_user.roles = _load_roles(db, user.role_ids)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info(f"Created user {db_user.id} ({db_user.email})")
    return user_to_out(db_user)


def update_user(db: Session, user_id: UUID, user: UserUpdate) -> UserOut:
    db_user = get_user_by_id(db, user_id)
    if not db_user:
        return not_found_response("User")

    update_data = user.model_dump(exclude_unset=True)
    if update_data.get("email"):
        update_data["email"] = update_data["email"].lower()
        existing = get_user_by_email(db, update_data["email"])
        if existing and existing.id != user_id:
            return error_response(
                message="User with this email already exists",
                status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
                http_status=409
            )
    _validate_references(db, update_data, user_id)

    for key, value in update_data.items():
        setattr(db_user, key, value)

    db.commit()
    db.refresh(db_user)
    logger.info(f"Updated user {user_id}")
    return user_to_out(db_user)


def delete_user(db: Session, user_id: UUID) -> UserOut:
    db_user = get_user_by_id(db, user_id)
    if not db_user:
        return not_found_response("User")

    in_use = db.query(func.count(RiskAssessment.id)).filter(
        or_(RiskAssessment.conducted_by == user_id, RiskAssessment.approver == user_id)).scalar()
    if in_use:
        return error_response(
            message="Cannot delete the user as risk assessments reference them",
            status_code=AppStatusCode.RELATED_RECORDS_EXIST,
            http_status=409
        )

    # reports lose their manager rather than blocking the delete
    db.query(User).filter(User.manager_id == user_id).update(
        {User.manager_id: None}, synchronize_session=False)

    deleted = user_to_out(db_user)
    db.delete(db_user)
    db.commit()
    logger.info(f"Deleted user {user_id}")
    return deleted

# ---------------- Roles ----------------


def get_roles(db: Session) -> List[RoleOut]:
    return [RoleOut.model_validate(r) for r in db.query(Role).order_by(Role.role_name.asc()).all()]


def create_role(db: Session, payload: RoleCreate) -> RoleOut:
    if db.query(Role).filter(func.lower(Role.role_name) == payload.role_name.lower()).first():
        return error_response(
            message=f"Role {payload.role_name} already exists",
            status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
            http_status=409
        )
    role = Role(role_name=payload.role_name)
    db.add(role)
    db.commit()
    db.refresh(role)
    logger.info(f"Created role {role.role_name}")
    return RoleOut.model_validate(role)


def assign_roles(db: Session, user_id: UUID, role_ids: List[UUID]) -> UserOut:
    """Replace the user's role set."""
    db_user = get_user_by_id(db, user_id)
    if not db_user:
        return not_found_response("User")

    db_user.roles = _load_roles(db, role_ids)
    db.commit()
    db.refresh(db_user)
    logger.info(f"Assigned roles {[str(r) for r in role_ids]} to user {user_id}")
    return user_to_out(db_user)
