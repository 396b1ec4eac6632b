import logging
from typing import Optional

from passlib.context import CryptContext
from fastapi import Request, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from starlette import status

from carwash.database import SessionLocal
from carwash.database_models import Service
from carwash.models.service import DEFAULT_SERVICES
from carwash.models.user import SessionUser

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["scrypt"], deprecated="auto")

SESSION_KEY = "user"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against the stored hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def sign_in(request: Request, user) -> None:
    """Store the user's identity in the session cookie."""
    request.session[SESSION_KEY] = SessionUser(
        id=user.id, email=user.email, full_name=user.full_name
    ).model_dump()


def get_optional_user(request: Request) -> Optional[SessionUser]:
    data = request.session.get(SESSION_KEY)
    if not data:
        return None
    return SessionUser(**data)


def get_current_user(request: Request) -> SessionUser:
    """Return the signed-in user, or redirect to the login form."""
    user = get_optional_user(request)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER,
            headers={"Location": str(request.url_for("login_form"))}
        )
    return user


def create_default_services_if_missing() -> int:
    """Seed the service catalogue when the table is empty. Returns rows inserted."""
    db = SessionLocal()
    try:
        if db.query(Service).first() is not None:
            logger.debug("Service catalogue already present, skipping seed")
            return 0

        for item in DEFAULT_SERVICES:
            db.add(Service(**item.model_dump(exclude={"featured"})))
        db.commit()
        logger.info("Seeded %d default services", len(DEFAULT_SERVICES))
        return len(DEFAULT_SERVICES)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not seed the service catalogue")
        raise
    finally:
        db.close()
