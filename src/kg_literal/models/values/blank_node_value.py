from pydantic import Field, StrictStr
from typing_extensions import Literal
from .base import Value


class BlankNodeValue(Value):
    """Blank node label, without the ``_:`` prefix"""

    kind: Literal["blank_node"] = Field(default="blank_node", frozen=True)
    value: StrictStr
