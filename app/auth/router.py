from fastapi import APIRouter, status

from app.auth.auth import authenticate_user, register_user
from app.auth.schemas import SUserAccessResponse, SUserAuth, SUserInfo, SUserRegister, SUserRegisterResponse
from app.config import settings
from app.constants.messages import ACCESS_GRANTED_MESSAGE
from app.dao.database import InMemoryStorage
from app.dao.session_maker import StorageDep, TransactionStorageDep

router = APIRouter(prefix=f"{settings.API_PREFIX}/users", tags=["Users"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    user_data: SUserRegister, storage: InMemoryStorage = TransactionStorageDep
) -> SUserRegisterResponse:
    user = await register_user(storage=storage, user_data=user_data)
    return SUserRegisterResponse(data=user)


@router.post("/access")
async def access(
    user_data: SUserAuth | None = None, storage: InMemoryStorage = StorageDep
) -> SUserAccessResponse:
    # A request without a body is treated as empty credentials
    user_data = user_data or SUserAuth()
    user = await authenticate_user(storage=storage, email=user_data.email, password=user_data.password)
    return SUserAccessResponse(msg=ACCESS_GRANTED_MESSAGE, data=SUserInfo.model_validate(user))
