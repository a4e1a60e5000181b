from collections.abc import Callable, Generator, Iterable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from faculty_portal.core.security import CurrentUser, UserRole, decode_token
from faculty_portal.db.session import SessionLocal
from faculty_portal.services.template_store import TemplateStore

security = HTTPBearer()


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> TemplateStore:
    return TemplateStore(db)


def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> CurrentUser:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_token(credentials.credentials)
    except JWTError as exc:
        raise credentials_exception from exc

    email = str(payload.get("sub") or "").strip()
    if not email:
        raise credentials_exception
    try:
        role = UserRole(payload.get("role"))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unsupported role") from exc
    return CurrentUser(email=email, role=role, display_name=payload.get("name"))


def require_roles(*roles: UserRole) -> Callable[[CurrentUser], CurrentUser]:
    allowed_roles: Iterable[UserRole] = set(roles)

    def role_checker(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if current_user.role not in allowed_roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
        return current_user

    return role_checker
