# storefront/schemas/status.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StatusResponse(BaseModel):
    """
    Minimal outcome envelope returned by cart mutations.

    Serialized as {"statusCode", "statusMessage", "count", "cartId"}.
    `count` carries the resulting quantity of the affected cart line.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status_code: int
    status_message: str
    count: int = 0
    cart_id: int | None = None
