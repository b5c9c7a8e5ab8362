"""Registration, login and the current-user lookup."""
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordRequestForm

from ..auth import create_access_token
from ..controllers import UserController
from ..dependencies import get_current_user, get_user_controller
from ..errors import ValidationFailed
from ..models import RoleEnum, UserStatus
from ..rate_limit import auth_limit
from ..schemas import Token, UserRead, UserRegister
from ..stores import Record

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
@auth_limit
def register_user(
    request: Request,
    user_in: UserRegister,
    users: UserController = Depends(get_user_controller),
) -> Record:
    return users.create_user(
        {
            **user_in.model_dump(exclude_none=True),
            "role": RoleEnum.GUEST.value,
            "status": UserStatus.ACTIVE.value,
        }
    )


@router.post("/login", response_model=Token)
@auth_limit
def login(
    request: Request,
    form_data: OAuth2PasswordRequestForm = Depends(),
    users: UserController = Depends(get_user_controller),
) -> Token:
    try:
        user = users.authenticate_user(form_data.username, form_data.password)
    except ValidationFailed as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect email or password")

    access_token = create_access_token({"sub": user["id"], "role": user.get("role")})
    return Token(access_token=access_token)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: Record = Depends(get_current_user)) -> Record:
    return current_user
