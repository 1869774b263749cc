"""GitHub webhook receiver."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from release_sync.core.security import require_github_signature
from release_sync.domain.releases import ReleaseSyncService
from release_sync.interfaces.http.deps import get_release_service
from release_sync.schemas import AssetRecord, ReleaseNotification, WebhookResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _failure(error: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"success": False, "error": error})


@router.post(
    "/webhook/github",
    response_model=WebhookResponse,
    response_model_exclude_none=True,
    summary="Receive a GitHub release notification",
)
async def github_webhook(
    body: bytes = Depends(require_github_signature),
    service: ReleaseSyncService = Depends(get_release_service),
):
    try:
        notification = ReleaseNotification.model_validate_json(body)
        source = notification.release_source()
        result = await service.handle_notification(notification.action, source)
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Webhook error")
        return _failure(str(exc))

    if not result.processed:
        return WebhookResponse(success=True, message="Event not processed")
    if not result.success:
        return _failure(result.error or "Sync failed")

    return WebhookResponse(
        success=True,
        message=f"Release {result.version} synced successfully",
        version=result.version,
        count=result.count,
        assets=[AssetRecord.model_validate(asdict(asset)) for asset in result.assets],
    )
