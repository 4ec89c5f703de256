"""
Departments router for department management.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.database.connections import get_mongo_client
from app.database.databases import directory_db
from app.dependencies.auth import get_current_active_user
from app.schemas.department import (
    DepartmentCreate,
    DepartmentListResponse,
    DepartmentResponse,
    DepartmentUpdate,
)
from app.services.department_service import DepartmentExistsError, DepartmentService

router = APIRouter(
    prefix="/api/v1/departments",
    tags=["Departments"],
    dependencies=[Depends(get_current_active_user)],
)


async def get_department_service() -> DepartmentService:
    """Dependency to get DepartmentService instance."""
    client = await get_mongo_client()
    return DepartmentService(client[directory_db.DB_NAME])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Department not found",
    )


@router.get(
    "",
    response_model=DepartmentListResponse,
    summary="List departments",
)
async def list_departments(
    department_service: DepartmentService = Depends(get_department_service),
):
    """List all departments."""
    departments = await department_service.list_departments()
    return {"departments": departments, "message": "Departments fetched successfully"}


@router.get(
    "/{slug}",
    response_model=DepartmentResponse,
    summary="Get department by slug",
)
async def get_department(
    slug: str,
    department_service: DepartmentService = Depends(get_department_service),
):
    department = await department_service.get_department(slug)
    if not department:
        raise _not_found()
    return {"department": department, "message": "Department fetched successfully"}


@router.post(
    "",
    response_model=DepartmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create department",
)
async def create_department(
    body: DepartmentCreate,
    department_service: DepartmentService = Depends(get_department_service),
):
    """
    Create a department.

    - **name**: Department name (required)
    - **slug**: Unique slug (required)
    - **logo**: Optional logo URL
    - **metadata**: Mapping, or the same mapping as a JSON string
    """
    try:
        department = await department_service.create_department(body)
    except DepartmentExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid metadata: {e}",
        )
    return {"department": department, "message": "Department created successfully"}


@router.put(
    "/{slug}",
    response_model=DepartmentResponse,
    summary="Update department",
)
async def update_department(
    slug: str,
    body: DepartmentUpdate,
    department_service: DepartmentService = Depends(get_department_service),
):
    """
    Partially update a department.

    Empty `name`/`logo` values are ignored; `metadata` keys are merged.
    """
    department = await department_service.update_department(slug, body)
    if not department:
        raise _not_found()
    return {"department": department, "message": "Department updated successfully"}


@router.delete(
    "/{slug}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete department",
)
async def delete_department(
    slug: str,
    department_service: DepartmentService = Depends(get_department_service),
):
    """
    Delete a department.

    Members referencing the slug are left untouched.
    """
    deleted = await department_service.delete_department(slug)
    if not deleted:
        raise _not_found()
