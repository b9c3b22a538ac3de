from typing import TYPE_CHECKING, Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from loguru import logger
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError, MultipleResultsFound, NoResultFound
from sqlalchemy.orm import Query, Session
from sqlalchemy.sql.elements import BinaryExpression, ColumnElement, UnaryExpression

from ecommerce.common.domain import BaseDomain
from ecommerce.network.database.repository.exceptions import (
    MultipleRepositoryObjectsFound,
    PreventingModelTruncation,
    RepositoryObjectNotFound,
)
from ecommerce.network.database.session import db

if TYPE_CHECKING:
    from ecommerce.common.model import BaseModel


class BaseQueryManager:
    def __init__(self, model: Type['BaseModel']) -> None:  # type: ignore[type-arg]
        self.model = model

    def get_query(self, *clauses: Any, **specification: Any) -> 'Query[BaseModel]':  # type: ignore[type-arg]
        query = self.model._get_session().query(self.model)
        for clause in clauses:
            query = query.where(clause)
        for key, value in specification.items():
            query = self.model._parse_specification(query, key, value)
        return query


ReadDomainType = TypeVar('ReadDomainType', bound=BaseDomain)
CreateDomainType = TypeVar('CreateDomainType', bound=BaseDomain)


class RepositoryMixin(Generic[ReadDomainType, CreateDomainType]):
    """
    Database access layer. All interaction with the database should be routed
    through this layer. all public interfaces accept and return records built on
    the pydantic base domain, read records are populated field by field from
    model attributes
    """

    __create_domain__: Type[CreateDomainType] = NotImplemented
    __read_domain__: Type[ReadDomainType] = NotImplemented
    query_manager: Type[BaseQueryManager] | None = BaseQueryManager

    @classmethod
    def _get_session(cls) -> Session:
        return db.session

    @classmethod
    def get_query(cls, *clauses: Any, **specification: Any) -> 'Query[BaseModel]':  # type: ignore[type-arg]
        if cls.query_manager is None:
            raise ValueError(f'query_manager not set for {cls.__name__}')
        return cls.query_manager(cls).get_query(*clauses, **specification)  # type: ignore[arg-type]

    @classmethod
    def get(cls, *clauses: Union[BinaryExpression[Any], ColumnElement[bool]], **specification: Any) -> ReadDomainType:
        instance = cls._get(*clauses, **specification)

        return cls._to_domain(instance)

    @classmethod
    def get_or_none(cls, *clauses: Any, **specification: Any) -> ReadDomainType | None:
        try:
            instance = cls._get(*clauses, **specification)
        except RepositoryObjectNotFound:
            return None

        return cls._to_domain(instance)

    @classmethod
    def _get(cls, *clauses: Any, **specification: Any) -> 'BaseModel[Any, Any]':
        try:
            return cls.get_query(*clauses, **specification).one()
            # assert one and only one object returned
        except MultipleResultsFound:
            raise MultipleRepositoryObjectsFound(f'Multiple results found for {cls.__name__}: {specification}!')
        except NoResultFound:
            raise RepositoryObjectNotFound(f'{cls.__name__}: {specification} not found!')

    @classmethod
    def list(
        cls,
        *clauses: Any,
        ordering: Optional[List[Union[str, UnaryExpression]]] = None,  # type: ignore[type-arg]
        **specification: Any,
    ) -> List[ReadDomainType]:
        query = cls.get_query(*clauses, **specification)
        if ordering:
            orders = cls._parse_ordering(ordering)
            query = query.order_by(*orders)
        return [cls._to_domain(obj) for obj in query]

    @classmethod
    def count(cls, *clauses: Any, **specification: Any) -> int:
        query = cls.get_query(*clauses, **specification)
        return int(query.count())

    @classmethod
    def create(cls, domain_obj: CreateDomainType) -> ReadDomainType:
        model_instance = cls._create(**cls._to_columns(domain_obj))
        return cls._to_domain(model_instance)

    @classmethod
    def delete(cls, *clauses: Union[BinaryExpression[Any], ColumnElement[bool]], **specification: Any) -> int:
        if specification:
            logger.warning(f'specification kwargs for {cls.__name__}.delete is deprecated please dont use!')

        if not clauses and not specification:
            raise PreventingModelTruncation(f'Must pass clauses to avoid truncating {cls.__name__}')

        # Ensure clauses like and_() or or_() that ultimately evaluate to nothing are checked as well
        non_empty_clauses = False
        if clauses:
            for clause in clauses:
                compiled = str(clause.compile())
                if compiled:
                    non_empty_clauses = True
                    break

        if clauses and not non_empty_clauses:
            raise PreventingModelTruncation(f'Empty clauses would cause truncating {cls.__name__}!')

        # Loaded so relationship cascades (delete-orphan) apply to owned rows
        instances = cls.get_query(*clauses, **specification).all()
        for instance in instances:
            cls._get_session().delete(instance)
        try:
            cls._get_session().flush()
        except IntegrityError:
            cls._get_session().rollback()
            raise
        return len(instances)

    @classmethod
    def update(cls, id: int, **updates: Any) -> ReadDomainType:
        model_instance = cls.get_query(id=id).one()
        for key, value in updates.items():
            if not hasattr(model_instance, key):
                raise ValueError(f"The key '{key}' is not a valid attribute for this model.")
            setattr(model_instance, key, value)

        try:
            cls._get_session().flush([model_instance])
        except IntegrityError:
            cls._get_session().rollback()
            raise

        return cls.get(cls.id == id)  # type: ignore[attr-defined]

    @classmethod
    def _create(cls, **attributes: Any) -> 'BaseModel[Any, Any]':
        model_instance = cls(**attributes)
        cls._get_session().add(model_instance)
        try:
            cls._get_session().flush([model_instance])
        except IntegrityError:
            cls._get_session().rollback()
            raise

        return model_instance  # type: ignore[return-value]

    @classmethod
    def _to_columns(cls, domain_obj: BaseDomain) -> Dict[str, Any]:
        """
        Column values of a record. Relations and keys the table does not
        map are left out, a missing primary key is left to the database
        """
        column_names = {attr.key for attr in inspect(cls).column_attrs}
        field_names = set(type(domain_obj).model_fields) & column_names
        values = domain_obj.model_dump(include=field_names)
        if values.get('id') is None:
            values.pop('id', None)
        return values

    @classmethod
    def _parse_ordering(
        cls, ordering: List[Union[str, 'UnaryExpression[Any]']] | None = None
    ) -> List['UnaryExpression[Any]']:
        """
        Parses str references for a field like:
        ['-order_date', 'total_amount']
        """
        order_expressions = []
        if ordering:
            for order in ordering:
                if isinstance(order, str):
                    if order[0] == '-':
                        # Get rid of first character
                        ordering_attr = getattr(cls, order[1:])
                        order_expressions.append(ordering_attr.desc())
                    else:
                        ordering_attr = getattr(cls, order)
                        order_expressions.append(ordering_attr.asc())
                else:
                    # Assume already an expression
                    order_expressions.append(order)

        return order_expressions

    @classmethod
    def _parse_specification(cls, query: Any, key: Any, value: Any) -> Any:
        return query.where(getattr(cls, key) == value)

    @classmethod
    def _to_domain(cls, model_instance: 'BaseModel[Any, Any]') -> ReadDomainType:
        return cls.__read_domain__.model_validate(model_instance)  # type: ignore[no-any-return]
