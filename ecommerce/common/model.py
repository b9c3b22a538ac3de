from datetime import datetime
from importlib import import_module
from typing import Any, Optional

from humps import decamelize  # type: ignore[attr-defined]
from loguru import logger
from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column

from ecommerce import settings
from ecommerce.network.database.repository.mixin import (
    CreateDomainType,
    ReadDomainType,
    RepositoryMixin,
)


class BaseModel(DeclarativeBase, RepositoryMixin[ReadDomainType, CreateDomainType]):
    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime, server_default=func.now())

    @declared_attr
    def modified_at(cls) -> Mapped[Optional[datetime]]:
        return mapped_column(DateTime, onupdate=func.now(), nullable=True)

    @declared_attr.directive
    def __tablename__(cls) -> str:
        # CustomerOrderModel -> customer_order
        return decamelize(cls.__name__.removesuffix('Model'))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(id={self.id!r})'


def import_model_modules() -> list[Any]:
    """
    Used by things like the test suite and shells to bring in the relevant models
    Looks for `models.py` in directories registered.
    """
    model_modules = []
    for app in settings.BOUNDARIES:
        import_path = f'{settings.BASE_MODULE}.{app}.models'
        logger.debug(f'importing: {import_path}')
        module = import_module(import_path)
        model_modules.append(module)

    return model_modules
