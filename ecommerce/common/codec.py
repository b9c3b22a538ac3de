from collections.abc import Mapping
from functools import cache
from typing import Any, Dict, Generic, Type, TypeVar

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from ecommerce.common.domain import BaseDomain
from ecommerce.common.exceptions import DataFormatException

RecordType = TypeVar('RecordType', bound=BaseDomain)


class JSONObjectCodec(Generic[RecordType]):
    """
    Decodes structured-data objects (parsed JSON objects) into records and
    encodes records back into them. Records do not inherit this behaviour,
    they are constructed by a codec:

        codec = JSONObjectCodec(Customer)
        customer = codec.decode({'listAddress': [{'city': 'Lisbon'}]})
        codec.encode(customer)  # {'listAddress': [{'city': 'Lisbon', ...}], ...}

    Keys are matched by camelCase alias or by attribute name, keys the record
    does not declare are kept on the record.
    """

    def __init__(self, record_type: Type[RecordType]) -> None:
        self.record_type = record_type
        self._adapter: TypeAdapter[RecordType] = TypeAdapter(record_type)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.record_type.__name__})'

    def decode(self, source: Any) -> RecordType:
        """
        Build a record from a structured-data object. Only mappings are
        accepted: strings are not parsed here, use `decode_text` for JSON text.
        :raises DataFormatException: when `source` cannot be interpreted
        """
        if not isinstance(source, Mapping):
            logger.debug(f'refusing to decode {self.record_type.__name__} from {type(source).__name__}')
            raise DataFormatException(
                message=f'Cannot decode {self.record_type.__name__}: expected an object, got {type(source).__name__}',
                context=[{'type': 'mapping_type', 'loc': (), 'input_type': type(source).__name__}],
            )

        try:
            record = self._adapter.validate_python(source, from_attributes=False)
        except ValidationError as e:
            raise self._format_error(e) from e

        logger.debug(f'decoded {self.record_type.__name__} from keys: {sorted(str(key) for key in source)}')
        return record

    def decode_text(self, text: str | bytes) -> RecordType:
        """
        Parse JSON text holding a single object and build a record from it.
        :raises DataFormatException: on malformed JSON or a non-object document
        """
        try:
            record = self._adapter.validate_json(text)
        except ValidationError as e:
            raise self._format_error(e) from e

        logger.debug(f'decoded {self.record_type.__name__} from json text')
        return record

    def encode(self, record: RecordType, exclude_unset: bool = False) -> Dict[str, Any]:
        """
        Structured-data object for `record` with camelCase keys and JSON
        compatible values
        """
        logger.debug(f'encoding {self.record_type.__name__} (exclude_unset={exclude_unset})')
        return self._adapter.dump_python(record, mode='json', by_alias=True, exclude_unset=exclude_unset)

    def encode_text(self, record: RecordType, exclude_unset: bool = False) -> str:
        logger.debug(f'encoding {self.record_type.__name__} to json text (exclude_unset={exclude_unset})')
        return self._adapter.dump_json(record, by_alias=True, exclude_unset=exclude_unset).decode('utf-8')

    def _format_error(self, error: ValidationError) -> DataFormatException:
        details = error.errors(include_url=False)
        logger.debug(f'failed to decode {self.record_type.__name__}: {details}')
        return DataFormatException(
            message=f'Cannot decode {self.record_type.__name__}: {error.error_count()} invalid value(s)',
            context=details,
        )


@cache
def codec_for(record_type: Type[RecordType]) -> JSONObjectCodec[RecordType]:
    """
    Shared codec per record type, building the validator is not free
    """
    return JSONObjectCodec(record_type)
