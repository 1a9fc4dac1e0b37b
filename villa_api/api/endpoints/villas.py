"""
Villa CRUD endpoints - RESTful resource (GET/POST/PUT/PATCH/DELETE) under /api/VillaAPI.
Challenge: Uniform envelope on every body, store failures mapped per endpoint.
Design: Thin controller; service layer holds validation and mapping.
"""

from fastapi import APIRouter, Body, Request, Response, status

from villa_api.core.exceptions import StoreError
from villa_api.db.repositories.villa_repository import VillaRepository
from villa_api.db.session import DbSession
from villa_api.schemas.patch import PatchOperation
from villa_api.schemas.response import APIResponse
from villa_api.schemas.villa import VillaCreateDTO, VillaUpdateDTO
from villa_api.services.villa_service import VillaService

router = APIRouter()


def _get_villa_service(session: DbSession) -> VillaService:
    """Factory for service with repository injection (Dependency Inversion)."""
    return VillaService(VillaRepository(session))


def _store_failure(exc: StoreError, status_code: int) -> Response:
    """Store errors pass their message through; the status depends on the endpoint."""
    return APIResponse.failure(status_code, exc.messages).to_response()


@router.get("", response_model=APIResponse)
async def list_villas(session: DbSession):
    """List all villas. REST: GET /api/VillaAPI."""
    svc = _get_villa_service(session)
    try:
        villas = await svc.list_villas()
    except StoreError as exc:
        return _store_failure(exc, status.HTTP_404_NOT_FOUND)
    return APIResponse.ok([v.model_dump(by_alias=True) for v in villas]).to_response()


@router.get("/{villa_id}", name="get_villa", response_model=APIResponse)
async def get_villa(session: DbSession, villa_id: int):
    svc = _get_villa_service(session)
    try:
        villa = await svc.get_by_id(villa_id)
    except StoreError as exc:
        return _store_failure(exc, status.HTTP_404_NOT_FOUND)
    return APIResponse.ok(villa.model_dump(by_alias=True)).to_response()


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
async def create_villa(session: DbSession, request: Request, data: VillaCreateDTO):
    """Create villa. Location header points at GET /api/VillaAPI/{id}."""
    svc = _get_villa_service(session)
    try:
        villa = await svc.create(data)
    except StoreError as exc:
        return _store_failure(exc, status.HTTP_400_BAD_REQUEST)
    location = str(request.url_for("get_villa", villa_id=villa.id))
    return APIResponse.ok(villa.model_dump(by_alias=True), status.HTTP_201_CREATED).to_response(
        headers={"Location": location}
    )


@router.delete("/{villa_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_villa(session: DbSession, villa_id: int):
    svc = _get_villa_service(session)
    try:
        await svc.delete(villa_id)
    except StoreError as exc:
        return _store_failure(exc, status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{villa_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_villa(session: DbSession, villa_id: int, data: VillaUpdateDTO):
    """Full replace. Body id must equal the path id."""
    svc = _get_villa_service(session)
    try:
        await svc.update(villa_id, data)
    except StoreError as exc:
        return _store_failure(exc, status.HTTP_406_NOT_ACCEPTABLE)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{villa_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_villa(
    session: DbSession,
    villa_id: int,
    operations: list[PatchOperation] | None = Body(default=None),
):
    """Partial update from a JSON Patch document (list of operations)."""
    svc = _get_villa_service(session)
    try:
        await svc.patch(villa_id, operations)
    except StoreError as exc:
        return _store_failure(exc, status.HTTP_406_NOT_ACCEPTABLE)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
