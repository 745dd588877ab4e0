# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Team member directory endpoints.
Thin HTTP layer, delegates ALL logic to DirectoryService.
"""

from fastapi import APIRouter, Depends

from team_scheduler.core.dependencies import get_directory_service
from team_scheduler.schemas.scheduler import (
    UserCreateRequest,
    UserDeletedResponse,
    UserResponse,
)
from team_scheduler.services.directory_service import DirectoryService

router = APIRouter(prefix="/api", tags=["Users"])


@router.get("/users", response_model=list[UserResponse])
def list_users(
    service: DirectoryService = Depends(get_directory_service),
):
    """List team members in the order they were added."""
    return service.list_users()


@router.post("/users", status_code=201, response_model=UserResponse)
def create_user(
    payload: UserCreateRequest,
    service: DirectoryService = Depends(get_directory_service),
):
    """Add a team member with an empty schedule."""
    return service.add_user(
        name=payload.name,
        email=payload.email,
        role=payload.role,
    )


@router.delete("/users/{user_id}", response_model=UserDeletedResponse)
def delete_user(
    user_id: int,
    service: DirectoryService = Depends(get_directory_service),
):
    """Remove a team member along with their schedule and availability."""
    return service.delete_user(user_id)
