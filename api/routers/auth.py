import logging

from fastapi import APIRouter, Depends, HTTPException, status

from core.security import get_current_user
from schemas.user_schema import UserCreate, UserInfo
from services.firebase_service import create_user_in_firebase

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Accounts"])


@router.post("/signup", response_model=UserInfo, status_code=status.HTTP_201_CREATED)
async def create_account(account: UserCreate):
    """
    Creates a PackPal account in Firebase Auth.
    The app signs the traveller in on the client afterwards, so no token is returned here.
    """
    try:
        return create_user_in_firebase(account.email, account.password, account.full_name)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Account creation failed for %s", account.email)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not create the account, please try again")


@router.get("/me", response_model=UserInfo)
async def traveller_profile(current_user: dict = Depends(get_current_user)):
    """Profile of the signed-in traveller, read from their token claims."""
    return UserInfo(uid=current_user["uid"], email=current_user.get("email"), full_name=current_user.get("name"))
