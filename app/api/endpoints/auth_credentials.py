# app/api/endpoints/auth_credentials.py

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from config.database import get_db
from config.settings import SESSION_COOKIE_NAME
from app.dependencies.auth import SessionContext, get_current_session
from app.models.auth_models import Caretaker, Family
from app.schemas.auth_schema import LoginRequest, RegisterRequest, SessionResponse, TokenResponse
from app.schemas.base_schema import ApiResponse
from app.schemas.caretaker_schema import CaretakerResponse
from app.utils.crud import persisting
from app.utils.errors import AuthError
from app.utils.security import hash_pin, issue_session, verify_pin
from app.utils.timezone import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[CaretakerResponse])
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    # 1) Create the family
    # 2) Create its first caretaker as admin
    with persisting(db, "Failed to register family"):
        family = Family(name=data.family_name)
        db.add(family)
        db.flush()  # family.id is needed before the caretaker row

        caretaker = Caretaker(
            family_id=family.id,
            login_id=data.login_id,
            name=data.name,
            type=data.type,
            role="ADMIN",
            security_pin=hash_pin(data.pin),
        )
        db.add(caretaker)
        db.commit()
        db.refresh(caretaker)

    logger.info("family %s registered", family.id)
    return ApiResponse(data=CaretakerResponse.model_validate(caretaker))


@router.post("/login", response_model=ApiResponse[TokenResponse])
def login(data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    caretaker = (
        db.query(Caretaker)
        .filter_by(family_id=data.family_id, login_id=data.login_id)
        .filter(Caretaker.deleted_at.is_(None))
        .first()
    )
    if not caretaker or not verify_pin(data.pin, caretaker.security_pin):
        raise AuthError("Invalid credentials")

    with persisting(db, "Failed to create session"):
        session, token = issue_session(db, caretaker)

    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        httponly=True,
        samesite="lax",
        max_age=int((session.expires_at - session.issued_at).total_seconds()),
    )
    return ApiResponse(data=TokenResponse(
        access_token=token,
        caretaker_id=caretaker.id,
        name=caretaker.name,
        role=caretaker.role,
        family_id=caretaker.family_id,
        issued_at=session.issued_at,
        expires_at=session.expires_at,
    ))


@router.post("/logout", response_model=ApiResponse)
def logout(
    response: Response,
    db: Session = Depends(get_db),
    context: SessionContext = Depends(get_current_session),
):
    with persisting(db, "Failed to end session"):
        context.session.revoked_at = utc_now()
        db.commit()

    response.delete_cookie(SESSION_COOKIE_NAME)
    return ApiResponse()


@router.get("/me", response_model=ApiResponse[SessionResponse])
def me(context: SessionContext = Depends(get_current_session)):
    return ApiResponse(data=SessionResponse(
        session_id=context.session.id,
        caretaker_id=context.caretaker.id,
        name=context.caretaker.name,
        role=context.caretaker.role,
        family_id=context.family_id,
        issued_at=context.session.issued_at,
        expires_at=context.session.expires_at,
    ))
