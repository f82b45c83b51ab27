from collections.abc import AsyncGenerator

from fastapi import Depends

from app.dao.database import InMemoryStorage, storage


def get_storage() -> InMemoryStorage:
    return storage


async def get_transaction_storage(
    current_storage: InMemoryStorage = Depends(get_storage),  # nosec # noqa B008
) -> AsyncGenerator[InMemoryStorage, None]:
    # Hold the storage lock for the whole request
    async with current_storage.lock:
        yield current_storage


StorageDep = Depends(get_storage)
TransactionStorageDep = Depends(get_transaction_storage)
