import logging
from typing import Optional
from fastapi import APIRouter, Request, Form
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import RedirectResponse
from starlette import status

from carwash.database import SessionLocal
from carwash.database_models import User
from carwash.auth_utils import (
    verify_password,
    get_password_hash,
    get_optional_user,
    sign_in,
)
from carwash.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

MIN_PASSWORD_LENGTH = 6


# --- LOGIN ---
@router.get("/login", name="login_form")
def login_form(request: Request):
    """Show the login form."""
    if get_optional_user(request):
        return RedirectResponse(url=request.url_for("dashboard"), status_code=status.HTTP_303_SEE_OTHER)

    return templates.TemplateResponse(
        request,
        "auth/login.html",
        {"title": "Login", "user": None}
    )


@router.post("/login", name="login_process")
def login_process(request: Request, email: str = Form(...), password: str = Form(...)):
    email = email.strip().lower()

    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email).first()

        if user and verify_password(password, user.password_hash):
            sign_in(request, user)
            logger.info("User %s signed in", user.id)
            return RedirectResponse(url=request.url_for("dashboard"), status_code=status.HTTP_303_SEE_OTHER)

        return templates.TemplateResponse(
            request,
            "auth/login.html",
            {
                "title": "Login",
                "user": None,
                "email": email,
                "error": "Invalid email or password."
            }
        )
    finally:
        db.close()


# --- REGISTER ---
@router.get("/register", name="register_form")
def register_form(request: Request):
    if get_optional_user(request):
        return RedirectResponse(url=request.url_for("dashboard"), status_code=status.HTTP_303_SEE_OTHER)

    return templates.TemplateResponse(
        request,
        "auth/register.html",
        {"title": "Register", "user": None}
    )


@router.post("/register", name="register_process")
def register_process(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    full_name: Optional[str] = Form(None),
):
    email = email.strip().lower()
    full_name = (full_name or "").strip() or None

    def form_error(message: str):
        return templates.TemplateResponse(
            request,
            "auth/register.html",
            {
                "title": "Register",
                "user": None,
                "email": email,
                "full_name": full_name,
                "error": message
            }
        )

    if len(password) < MIN_PASSWORD_LENGTH:
        return form_error(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")

    db = SessionLocal()
    try:
        if db.query(User).filter(User.email == email).first():
            return form_error(f"An account for '{email}' already exists.")

        new_user = User(
            email=email,
            password_hash=get_password_hash(password),
            full_name=full_name
        )
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
        sign_in(request, new_user)
        logger.info("Registered user %s", new_user.id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error registering %s", email)
        return form_error("Registration failed. Please try again.")
    finally:
        db.close()

    return RedirectResponse(url=request.url_for("dashboard"), status_code=status.HTTP_303_SEE_OTHER)


# --- LOGOUT ---
@router.get("/logout", name="logout")
def logout(request: Request):
    """Clear the session and go back to the landing page."""
    request.session.clear()
    return RedirectResponse(url=request.url_for("home"), status_code=status.HTTP_303_SEE_OTHER)
