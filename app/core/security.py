from typing import Optional
from jose import jwt, JWTError
from fastapi import HTTPException, status, Depends
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel
from app.core.config import settings

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login")

class TokenData(BaseModel):
    id: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

def verify_token(token: str) -> TokenData:
    """
    Decode a Supabase access token. The subject is the uid that owns
    users/{uid} or storages/{uid}.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=["HS256"],
            options={"verify_aud": False}
        )
    except JWTError:
        raise _credentials_exception()

    user_id: Optional[str] = payload.get("sub")
    if user_id is None:
        raise _credentials_exception()
    return TokenData(id=user_id, email=payload.get("email"), phone=payload.get("phone"))

def get_current_user(token: str = Depends(oauth2_scheme)) -> TokenData:
    return verify_token(token)
