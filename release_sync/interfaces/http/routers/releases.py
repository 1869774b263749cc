"""Read API over mirrored releases."""

from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from release_sync.domain.releases import ReleaseSyncService
from release_sync.interfaces.http.deps import get_release_service
from release_sync.schemas import ErrorResponse, ReleaseListResponse, ReleaseRecord

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("", response_model=ReleaseListResponse, summary="List mirrored release tags")
async def list_releases(service: ReleaseSyncService = Depends(get_release_service)) -> ReleaseListResponse:
    listing = await service.list_releases()
    return ReleaseListResponse(releases=listing.releases, latest=listing.latest, count=listing.count)


@router.get("/latest", response_model=ReleaseRecord, responses=_NOT_FOUND, summary="Most recently synced release")
async def get_latest_release(service: ReleaseSyncService = Depends(get_release_service)) -> ReleaseRecord:
    release = await service.get_latest_release()
    return ReleaseRecord.from_domain(release)


@router.get("/{tag}", response_model=ReleaseRecord, responses=_NOT_FOUND, summary="Release metadata by tag")
async def get_release(tag: str, service: ReleaseSyncService = Depends(get_release_service)) -> ReleaseRecord:
    release = await service.get_release(tag)
    return ReleaseRecord.from_domain(release)


@router.get("/{tag}/assets/{name}", responses=_NOT_FOUND, summary="Download a mirrored asset")
async def download_asset(
    tag: str,
    name: str,
    service: ReleaseSyncService = Depends(get_release_service),
) -> Response:
    stored = await service.get_asset(tag, name)
    return Response(
        content=stored.content,
        media_type=stored.asset.content_type,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(stored.asset.name)}"},
    )
