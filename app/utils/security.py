# app/utils/security.py
import secrets
from datetime import timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from config.settings import JWT_ALGORITHM, JWT_EXPIRE_HOURS, JWT_SECRET
from app.models.auth_models import AuthSession, Caretaker
from app.utils.errors import AuthError
from app.utils.timezone import utc_now

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_pin(pin: str) -> str:
    return pwd_context.hash(pin)


def verify_pin(pin: str, pin_hash: str) -> bool:
    return pwd_context.verify(pin, pin_hash)


def issue_session(db: Session, caretaker: Caretaker):
    """Persist a new session for ``caretaker`` and return (session, jwt)."""
    issued_at = utc_now().replace(microsecond=0)
    session = AuthSession(
        id=secrets.token_urlsafe(24),
        caretaker_id=caretaker.id,
        issued_at=issued_at,
        expires_at=issued_at + timedelta(hours=JWT_EXPIRE_HOURS),
    )
    db.add(session)
    db.commit()
    db.refresh(session)

    payload = {
        "sub": str(caretaker.id),
        "fid": caretaker.family_id,
        "role": caretaker.role,
        "jti": session.id,
        "iat": int(session.issued_at.timestamp()),
        "exp": int(session.expires_at.timestamp()),
    }
    return session, jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError:
        raise AuthError("Invalid or expired token")
    if not payload.get("jti") or not payload.get("sub"):
        raise AuthError("Invalid or expired token")
    return payload
