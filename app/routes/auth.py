# app/routes/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import RedirectResponse
from fastapi.security import OAuth2PasswordRequestForm
from google.oauth2 import id_token
from google.auth.transport import requests
from sqlalchemy.ext.asyncio import AsyncSession
import requests as http

from app.core.config import get_settings
from app.core.security import create_access_token, get_password_hash, verify_password
from app.crud.user import user as user_crud
from app.database import get_db
from app.schemas.user import Token, UserCreate, UserRead

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger(__name__)


def _google_settings():
    settings = get_settings()
    if not (settings.GOOGLE_CLIENT_ID and settings.GOOGLE_CLIENT_SECRET and settings.GOOGLE_REDIRECT_URI):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Google login is not configured")
    return settings


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register(user_in: UserCreate, db: AsyncSession = Depends(get_db)):
    if await user_crud.get_by_email(db, user_in.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    return await user_crud.create(db, obj_in=user_in, hash_fn=get_password_hash)


@router.post("/token", response_model=Token)
async def login(form_data: OAuth2PasswordRequestForm = Depends(), db: AsyncSession = Depends(get_db)):
    user = await user_crud.authenticate(db, form_data.username, form_data.password, verify_password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=create_access_token({"sub": str(user.id)}))


@router.get("/google/login")
def google_login():
    settings = _google_settings()
    google_auth_url = (
        "https://accounts.google.com/o/oauth2/v2/auth"
        "?response_type=code"
        f"&client_id={settings.GOOGLE_CLIENT_ID}"
        f"&redirect_uri={settings.GOOGLE_REDIRECT_URI}"
        "&scope=openid%20email%20profile"
    )
    return RedirectResponse(url=google_auth_url)


@router.get("/google/callback", response_model=Token)
async def google_callback(code: str, db: AsyncSession = Depends(get_db)):
    settings = _google_settings()

    # Exchange code for token
    token_url = "https://oauth2.googleapis.com/token"
    data = {
        "code": code,
        "client_id": settings.GOOGLE_CLIENT_ID,
        "client_secret": settings.GOOGLE_CLIENT_SECRET,
        "redirect_uri": settings.GOOGLE_REDIRECT_URI,
        "grant_type": "authorization_code",
    }

    response = await run_in_threadpool(http.post, token_url, data=data, timeout=10)
    token_data = response.json()

    if "id_token" not in token_data:
        raise HTTPException(status_code=400, detail="Google token exchange failed")

    id_info = await run_in_threadpool(
        id_token.verify_oauth2_token, token_data["id_token"], requests.Request(), settings.GOOGLE_CLIENT_ID
    )

    email = id_info.get("email")
    name = id_info.get("name")

    # Check user exists or create
    user = await user_crud.get_by_email(db, email)
    if not user:
        user = await user_crud.create_google_user(db, email=email, name=name, google_sub=id_info.get("sub"))
        logger.info("created user %s from google login", user.id)

    return Token(access_token=create_access_token({"sub": str(user.id)}))
