"""Run the service with uvicorn: ``python -m release_sync``."""

import uvicorn

from release_sync.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "release_sync.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
