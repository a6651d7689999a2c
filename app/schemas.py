from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Numeric(28, 8) columns: 20 integer digits, 8 decimal places
MONEY_DIGITS = 28
MONEY_PLACES = 8


def format_decimal(value: Decimal) -> str:
    # "100", not "100.00000000" or "1E+2"
    return format(value.normalize(), "f")


Money = Annotated[Decimal, PlainSerializer(format_decimal, return_type=str)]

# request side: rejected if the column could not hold it exactly
Amount = Annotated[Decimal, Field(max_digits=MONEY_DIGITS, decimal_places=MONEY_PLACES)]


class CamelSchema(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
