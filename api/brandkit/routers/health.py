import logging

from fastapi import APIRouter

from ..core.config import load_settings
from ..services.openai_client import OpenAIChatClient

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/healthz")
async def health():
    """Report whether generation can run: credential present, provider reachable."""
    settings = load_settings()
    key_configured = bool(settings.openai_api_key)

    # Skip the external probe in dev/test to keep healthz fast
    if not key_configured:
        provider_healthy = False
    elif settings.service_env in {"dev", "test"}:
        provider_healthy = True
    else:
        provider_healthy = await OpenAIChatClient.from_settings(settings).health_check()

    if not (key_configured and provider_healthy):
        logger.warning(
            "Health check degraded",
            extra={"openai_key_configured": key_configured, "openai_reachable": provider_healthy},
        )
        return {
            "ok": False,
            "status": "degraded",
            "services": {
                "openai_key_configured": key_configured,
                "openai": provider_healthy,
            },
        }

    return {"ok": True, "status": "healthy"}
