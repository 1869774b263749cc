"""Release domain specific exceptions."""


class ReleaseError(Exception):
    """Base class for release sync domain errors."""


class ReleaseNotFoundError(ReleaseError):
    """Raised when the requested release is not stored."""


class AssetNotFoundError(ReleaseError):
    """Raised when a release exists but the requested asset does not."""


class AssetDownloadError(ReleaseError):
    """Raised when an asset payload could not be fetched from its host."""

    def __init__(self, asset_name: str, status: int | str) -> None:
        super().__init__(f"Failed to download {asset_name}: {status}")
        self.asset_name = asset_name
        self.status = status


class InvalidSignatureError(ReleaseError):
    """Raised when a webhook delivery fails signature verification."""
