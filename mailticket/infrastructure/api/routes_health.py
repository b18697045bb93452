"""Health check endpoint."""

from fastapi import APIRouter

from mailticket.domain.policies.categories import category_names

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Report service status and the configured categories."""
    return {
        "status": "ok",
        "service": "Email-to-Ticket Parser",
        "categories": category_names(),
    }
