from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Money, area and percentage stay Decimal in Python and render as JSON numbers
DecimalNumber = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]
