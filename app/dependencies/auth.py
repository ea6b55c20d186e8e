from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from config.database import get_db
from config.settings import SESSION_COOKIE_NAME
from app.models.auth_models import AuthSession, Caretaker
from app.utils.errors import AuthError, ForbiddenError
from app.utils.security import decode_token
from app.utils.timezone import utc_now

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


@dataclass
class SessionContext:
    """The authenticated caller, resolved once per request."""

    session: AuthSession
    caretaker: Caretaker

    @property
    def family_id(self) -> int:
        return self.caretaker.family_id

    @property
    def is_admin(self) -> bool:
        return self.caretaker.role == "ADMIN"


def get_current_session(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> SessionContext:
    token = token or request.cookies.get(SESSION_COOKIE_NAME)
    if not token:
        raise AuthError("Authentication required")

    payload = decode_token(token)
    session = db.query(AuthSession).filter_by(id=payload["jti"]).first()
    if session is None or session.revoked_at is not None:
        raise AuthError("Session is no longer valid")
    if session.expires_at <= utc_now():
        raise AuthError("Session expired")

    caretaker = session.caretaker
    if caretaker is None or caretaker.deleted_at is not None or str(caretaker.id) != payload["sub"]:
        raise AuthError("Caretaker not found")

    return SessionContext(session=session, caretaker=caretaker)


def get_family_id(
    x_family_id: Optional[int] = Header(None),
    context: SessionContext = Depends(get_current_session),
) -> int:
    # the header may only narrow to the caller's own family
    if x_family_id is not None and x_family_id != context.family_id:
        raise ForbiddenError("Access denied for this family")
    return context.family_id


def require_admin(context: SessionContext = Depends(get_current_session)) -> SessionContext:
    if not context.is_admin:
        raise ForbiddenError("Admin access required")
    return context
