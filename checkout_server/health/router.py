from fastapi import APIRouter

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root():
    return {"status": "ok", "message": "Stripe checkout server is running"}
