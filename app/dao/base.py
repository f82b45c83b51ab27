from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from loguru import logger
from pydantic import BaseModel

from .database import Base, InMemoryStorage

# Declare type parameter T constrained to subclasses of Base
T = TypeVar("T", bound=Base)


class BaseDAO(Generic[T]):
    """
    Base DAO class for asynchronous work with in-memory collections.
    Provides common methods for searching, adding, updating and counting
    records. Every lookup is a linear scan in insertion order.
    """

    model: type[T]

    @classmethod
    def _records(cls, storage: InMemoryStorage) -> list[T]:
        return storage.collection(cls.model)

    @staticmethod
    def _matches(record: T, filters: Mapping[str, Any]) -> bool:
        return all(getattr(record, key, None) == value for key, value in filters.items())

    @classmethod
    def _field_name(cls, key: str) -> str:
        # Accept both the Python attribute name and its camelCase alias
        for name, field in cls.model.model_fields.items():
            if key == name or key == field.alias:
                return name
        return key

    @classmethod
    async def find_one_or_none_by_id(cls, data_id: str, storage: InMemoryStorage) -> T | None:
        """
        Find a record by its ID.
        :param data_id: record ID
        :param storage: in-memory storage
        :return: model instance or None
        """
        logger.info(f"Searching for {cls.model.__name__} with ID: {data_id}")
        record = next((r for r in cls._records(storage) if r.id == data_id), None)
        if record:
            logger.info(f"Record with ID {data_id} found.")
        else:
            logger.info(f"Record with ID {data_id} not found.")
        return record

    @classmethod
    async def find_one_or_none(
        cls, storage: InMemoryStorage, filters: Mapping[str, Any] | list[Mapping[str, Any]]
    ) -> T | None:
        """
        Find a single record by filters.
        :param storage: in-memory storage
        :param filters: filter dictionary or list of filter dictionaries (combined with OR)
        :return: first matching model instance or None
        """
        logger.info(f"Searching one {cls.model.__name__} by filters: {filters}")
        conditions = filters if isinstance(filters, list) else [filters]
        record = next(
            (r for r in cls._records(storage) if any(cls._matches(r, f) for f in conditions)),
            None,
        )
        if record:
            logger.info(f"Record found by filters: {filters}")
        else:
            logger.info(f"Record not found by filters: {filters}")
        return record

    @classmethod
    async def find_all(cls, storage: InMemoryStorage, filters: Mapping[str, Any] | None) -> list[T]:
        """
        Find all records by filters.
        :param storage: in-memory storage
        :param filters: filter dictionary or None
        :return: list of model instances
        """
        filter_dict = filters or {}
        logger.info(f"Searching all {cls.model.__name__} by filters: {filter_dict}")
        records = [r for r in cls._records(storage) if cls._matches(r, filter_dict)]
        logger.info(f"Found {len(records)} records.")
        return records

    @classmethod
    async def add(cls, storage: InMemoryStorage, values: BaseModel | Mapping[str, Any]) -> T:
        """
        Add a single record.
        :param storage: in-memory storage
        :param values: Pydantic model or mapping with creation data
        :return: created model instance
        """
        values_dict = values.model_dump(exclude_unset=True) if isinstance(values, BaseModel) else dict(values)
        logger.info(f"Adding {cls.model.__name__} with fields: {sorted(values_dict)}")
        new_instance = cls.model(**values_dict)
        cls._records(storage).append(new_instance)
        logger.info(f"{cls.model.__name__} added successfully.")
        return new_instance

    @classmethod
    async def update(cls, record: T, values: Mapping[str, Any]) -> T:
        """
        Merge values onto an existing record in place.
        Keys are not validated: any provided key overwrites the attribute.
        :param record: stored model instance
        :param values: mapping of new values
        :return: the same, updated model instance
        """
        logger.info(f"Updating {cls.model.__name__} with ID {record.id} with params: {dict(values)}")
        for key, value in values.items():
            setattr(record, cls._field_name(key), value)
        logger.info(f"{cls.model.__name__} with ID {record.id} updated.")
        return record

    @classmethod
    async def count(cls, storage: InMemoryStorage, filters: Mapping[str, Any]) -> int:
        """
        Count records by filter.
        :param storage: in-memory storage
        :param filters: filter dictionary
        :return: number of records
        """
        logger.info(f"Counting {cls.model.__name__} records by filter: {filters}")
        count = sum(1 for r in cls._records(storage) if cls._matches(r, filters))
        logger.info(f"Found {count} records.")
        return count
