"""Account administration endpoints."""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..controllers import UserController
from ..dependencies import allow_roles, get_current_user, get_user_controller, is_admin
from ..models import RoleEnum
from ..schemas import UserRead, UserStatusUpdate, UserUpdate
from ..stores import Record

router = APIRouter(prefix="/api/users", tags=["users"])


def _found(user: Optional[Record]) -> Record:
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("", response_model=List[UserRead])
def list_users(
    role: Optional[RoleEnum] = Query(None),
    _: Record = Depends(allow_roles(RoleEnum.ADMIN)),
    users: UserController = Depends(get_user_controller),
) -> List[Record]:
    if role is not None:
        return users.get_users_by_role(role.value)
    return users.get_all_users()


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: str,
    current_user: Record = Depends(get_current_user),
    users: UserController = Depends(get_user_controller),
) -> Record:
    if not is_admin(current_user) and current_user["id"] != user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
    return _found(users.get_user_by_id(user_id))


@router.patch("/{user_id}", response_model=UserRead)
def update_user(
    user_id: str,
    user_update: UserUpdate,
    current_user: Record = Depends(get_current_user),
    users: UserController = Depends(get_user_controller),
) -> Record:
    if not is_admin(current_user) and current_user["id"] != user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")

    patch = user_update.model_dump(exclude_unset=True, exclude_none=True, mode="json")
    if "role" in patch and not is_admin(current_user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only admins can change roles")
    return _found(users.update_user(user_id, patch))


@router.patch("/{user_id}/status", response_model=UserRead)
def change_user_status(
    user_id: str,
    status_in: UserStatusUpdate,
    _: Record = Depends(allow_roles(RoleEnum.ADMIN)),
    users: UserController = Depends(get_user_controller),
) -> Record:
    return _found(users.change_user_status(user_id, status_in.status.value))


@router.delete("/{user_id}", response_model=UserRead)
def delete_user(
    user_id: str,
    _: Record = Depends(allow_roles(RoleEnum.ADMIN)),
    users: UserController = Depends(get_user_controller),
) -> Record:
    return _found(users.delete_user(user_id))
