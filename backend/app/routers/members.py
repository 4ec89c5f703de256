"""
Members router for member listing, lookup and updates.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, parse_page_param
from app.database.connections import get_mongo_client
from app.database.databases import directory_db
from app.dependencies.auth import CurrentUser, get_current_active_user
from app.schemas.member import (
    MemberCreate,
    MemberFilterParams,
    MemberListResponse,
    MemberResponse,
    MemberUpdate,
)
from app.services.member_service import MemberService

router = APIRouter(
    prefix="/api/v1/members",
    tags=["Members"],
    dependencies=[Depends(get_current_active_user)],
)


async def get_member_service() -> MemberService:
    """Dependency to get MemberService instance."""
    client = await get_mongo_client()
    return MemberService(client[directory_db.DB_NAME])


@router.get(
    "",
    response_model=MemberListResponse,
    summary="List members",
)
async def list_members(
    member_service: MemberService = Depends(get_member_service),
    department: Optional[str] = Query(None, description="Department slug"),
    role: Optional[str] = Query(None, description="Role label"),
    page: Optional[str] = Query(None, description="Page number (default 1)"),
    limit: Optional[str] = Query(None, description="Results per page (default 10)"),
):
    """
    List members with optional department/role filters, each joined with
    its user record.

    Non-numeric `page`/`limit` values fall back to the defaults.
    """
    filters = MemberFilterParams(
        department=department,
        role=role,
        page=parse_page_param(page, DEFAULT_PAGE),
        limit=parse_page_param(limit, DEFAULT_LIMIT),
    )

    result = await member_service.get_members(filters)
    return {**result, "message": "Members fetched successfully"}


@router.get(
    "/me",
    response_model=MemberResponse,
    summary="Get the current user's member record",
)
async def get_my_member(
    current_user: CurrentUser,
    member_service: MemberService = Depends(get_member_service),
):
    """Member record of the authenticated caller."""
    member = await member_service.get_member_by_user_id(current_user.id)
    return {"member": member, "message": "Member fetched successfully"}


@router.get(
    "/name/{name}",
    response_model=MemberResponse,
    summary="Get member by user name",
)
async def get_member_by_name(
    name: str,
    member_service: MemberService = Depends(get_member_service),
):
    """
    Find the first user whose name contains `name` (case-insensitive) and
    return their member record.
    """
    member = await member_service.get_member_by_name(name)
    return {"member": member, "message": "Member fetched successfully"}


@router.get(
    "/{user_id}",
    response_model=MemberResponse,
    summary="Get member by user ID",
)
async def get_member_by_id(
    user_id: str,
    member_service: MemberService = Depends(get_member_service),
):
    """Member record and user for the given user ID."""
    try:
        member = await member_service.get_member_by_user_id(user_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    return {"member": member, "message": "Member fetched successfully"}


@router.post(
    "",
    response_model=MemberResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create member",
)
async def create_member(
    body: MemberCreate,
    member_service: MemberService = Depends(get_member_service),
):
    """
    Create a member record.

    - **userId**: Referenced user ID (required)
    - **departmentSlug**: Department slug
    - **role**: Role label
    - **metadata**: Free-form key/value data
    """
    member = await member_service.create_member(body)
    return {"member": member, "message": "Member created successfully"}


@router.put(
    "/{user_id}",
    response_model=MemberResponse,
    summary="Update member",
)
async def update_member(
    user_id: str,
    body: MemberUpdate,
    member_service: MemberService = Depends(get_member_service),
):
    """
    Partially update the member of the given user.

    - **department** / **role**: replaced only when non-empty
    - **metadata**: keys are merged into the stored metadata

    Returns `member: null` when the user has no member record.
    """
    member = await member_service.update_member(user_id, body)
    return {"member": member, "message": "Member updated successfully"}


@router.delete(
    "/{member_id}",
    response_model=MemberResponse,
    summary="Delete member",
)
async def delete_member(
    member_id: str,
    member_service: MemberService = Depends(get_member_service),
):
    """
    Delete a member record by its own ID.

    **Warning**: This action cannot be undone.
    """
    try:
        member = await member_service.delete_member(member_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    if not member:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Member not found",
        )

    return {"member": member, "message": "Member deleted successfully"}
