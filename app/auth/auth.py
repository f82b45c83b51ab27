from loguru import logger

from app.auth.dao import UsersDAO
from app.auth.models import User
from app.auth.schemas import SUserRegister
from app.dao.database import InMemoryStorage
from app.exceptions import InvalidCredentialsException, MissingUserDataException, UserAlreadyExistsException


async def register_user(storage: InMemoryStorage, user_data: SUserRegister) -> User:
    """Create a user; the email must not belong to another user."""
    if not user_data.name or not user_data.email or not user_data.password:
        logger.info("Registration rejected: missing data")
        raise MissingUserDataException

    existing_user = await UsersDAO.find_one_or_none(storage=storage, filters={"email": user_data.email})
    if existing_user:
        logger.info(f"Registration rejected: email already taken: {user_data.email}")
        raise UserAlreadyExistsException

    user = await UsersDAO.add(storage=storage, values=user_data)
    logger.info(f"User registered: id={user.id}, email={user.email}")
    return user


async def authenticate_user(storage: InMemoryStorage, email: str | None, password: str | None) -> User:
    user = await UsersDAO.find_one_or_none(storage=storage, filters={"email": email})
    # Exact, case-sensitive comparison
    if user is None or user.password != password:
        logger.info(f"Failed access attempt: {email}")
        raise InvalidCredentialsException
    logger.info(f"User authenticated successfully: {email}")
    return user
