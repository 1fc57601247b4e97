"""
Shared schema configuration
"""
from decimal import Decimal
from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Fields are snake_case in Python and camelCase on the wire"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def decimal_from_float(value: Any) -> Any:
    """SQLite hands NUMERIC back as float; go through str to keep 0.1 as 0.1"""
    if isinstance(value, float):
        return Decimal(str(value))
    return value


def reject_null(value: Any) -> Any:
    """An update may omit a NOT NULL field but never set it to null"""
    if value is None:
        raise ValueError("may not be null")
    return value


# Fixed-precision fraction (job equity)
Equity = Annotated[Decimal, BeforeValidator(decimal_from_float)]


class DeletedResponse(BaseModel):
    """Delete acknowledgement"""
    deleted: Union[int, str]
