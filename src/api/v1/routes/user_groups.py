"""User Group API routes."""

from dataclasses import replace
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_user_group_service
from api.v1.schemas.user_group import (
    BulkAddUsersRequest,
    UserGroupCreate,
    UserGroupDetailResponse,
    UserGroupListResponse,
    UserGroupResponse,
    UserGroupUpdate,
)
from core.exceptions import UserGroupNotFoundError
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.acl import AclPermission, default_policies
from domain.entities.user_group import UserGroup
from domain.services.user_group_service import UserGroupService

router = APIRouter(
    prefix="/user-groups",
    tags=["user-groups"],
)

workspace_router = APIRouter(
    prefix="/workspaces/{workspace_id}",
    tags=["user-groups"],
)


@router.post(
    "",
    response_model=UserGroupDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user group",
    responses={
        201: {"description": "User group created"},
        400: {"description": "Invalid user group"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_user_group(
    request: Request,
    body: UserGroupCreate,
    user: CurrentUser,
    service: UserGroupService = Depends(get_user_group_service),
) -> UserGroupDetailResponse:
    """Create a user group. The creator is granted read, manage and delete."""
    group = await service.create(
        UserGroup(
            name=body.name,
            description=body.description,
            default_workspace_id=body.default_workspace_id,
            policies=default_policies(user.id),
        )
    )
    return UserGroupDetailResponse(data=UserGroupResponse.from_entity(group))


@router.get(
    "/{user_group_id}",
    response_model=UserGroupDetailResponse,
    summary="Get a user group",
    responses={
        200: {"description": "The user group"},
        404: {"description": "User group not found or not readable"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_user_group(
    request: Request,
    user_group_id: UUID,
    user: CurrentUser,
    service: UserGroupService = Depends(get_user_group_service),
) -> UserGroupDetailResponse:
    """Get a user group the caller can read."""
    group = await service.get_by_id(user_group_id, AclPermission.READ_USER_GROUPS)
    if group is None:
        raise UserGroupNotFoundError(str(user_group_id))
    return UserGroupDetailResponse(data=UserGroupResponse.from_entity(group))


@router.patch(
    "/{user_group_id}",
    response_model=UserGroupDetailResponse,
    summary="Update a user group",
    responses={
        200: {"description": "User group updated"},
        404: {"description": "User group not found or not manageable"},
        409: {"description": "User group was modified concurrently"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_user_group(
    request: Request,
    user_group_id: UUID,
    body: UserGroupUpdate,
    user: CurrentUser,
    service: UserGroupService = Depends(get_user_group_service),
) -> UserGroupDetailResponse:
    """Rename or re-describe a user group. Requires manage permission."""
    group = await service.get_by_id(user_group_id, AclPermission.MANAGE_USER_GROUPS)
    if group is None:
        raise UserGroupNotFoundError(str(user_group_id))

    changed = replace(
        group,
        name=body.name if body.name is not None else group.name,
        description=(
            body.description
            if "description" in body.model_fields_set
            else group.description
        ),
    )
    updated = await service.update(user_group_id, changed)
    return UserGroupDetailResponse(data=UserGroupResponse.from_entity(updated))


@router.delete(
    "/{user_group_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user group",
    responses={
        204: {"description": "User group deleted"},
        403: {"description": "Missing delete permission"},
        404: {"description": "User group not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_user_group(
    request: Request,
    user_group_id: UUID,
    user: CurrentUser,
    service: UserGroupService = Depends(get_user_group_service),
) -> None:
    """Delete a user group. Requires delete permission."""
    await service.delete(user_group_id)
    return None


@router.post(
    "/{user_group_id}/users",
    response_model=UserGroupDetailResponse,
    summary="Add users to a user group",
    responses={
        200: {"description": "Users appended to the group"},
        404: {"description": "User group or user not found"},
        409: {"description": "User group was modified concurrently"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def bulk_add_users(
    request: Request,
    user_group_id: UUID,
    body: BulkAddUsersRequest,
    user: CurrentUser,
    service: UserGroupService = Depends(get_user_group_service),
) -> UserGroupDetailResponse:
    """Append users to a group in the order given. Requires manage permission."""
    group = await service.add_users_by_id(user_group_id, body.user_ids)
    return UserGroupDetailResponse(data=UserGroupResponse.from_entity(group))


@workspace_router.get(
    "/default-user-groups",
    response_model=UserGroupListResponse,
    summary="List a workspace's default user groups",
    responses={
        200: {"description": "User groups whose default workspace matches"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_default_user_groups(
    request: Request,
    workspace_id: UUID,
    user: CurrentUser,
    service: UserGroupService = Depends(get_user_group_service),
) -> UserGroupListResponse:
    """List the user groups whose default workspace is ``workspace_id``."""
    data = [
        UserGroupResponse.from_entity(group)
        async for group in service.get_default_user_groups(workspace_id)
    ]
    return UserGroupListResponse(data=data, meta={"total": len(data)})
