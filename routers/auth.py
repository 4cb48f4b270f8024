from fastapi import APIRouter, Request, Form, Depends
from fastapi.responses import RedirectResponse, PlainTextResponse
from sqlmodel import Session, select
from starlette.status import HTTP_302_FOUND, HTTP_401_UNAUTHORIZED

from db import get_session
from models import User
from security import verify_password
from utils.cart import SESSION_KEY


router = APIRouter(tags=["Auth"])


# ========== LOGIN ==========
@router.post("/login")
def login(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
    session: Session = Depends(get_session),
):
    username = (username or "").strip()

    user = session.exec(select(User).where(User.username == username)).first()
    if not user or not verify_password(password, user.password_hash):
        return PlainTextResponse("Invalid credentials", status_code=HTTP_401_UNAUTHORIZED)

    # Conserva el carrito armado antes de loguearse
    cart = request.session.get(SESSION_KEY)
    request.session.clear()
    if cart:
        request.session[SESSION_KEY] = cart
    request.session["user_id"] = user.id        # ← CLAVE para el activity log

    return RedirectResponse("/index", status_code=HTTP_302_FOUND)


# ========== LOGOUT ==========
@router.get("/logout")
def logout(request: Request):
    request.session.clear()
    return RedirectResponse("/login", status_code=HTTP_302_FOUND)
