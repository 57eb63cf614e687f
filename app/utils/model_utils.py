# Third-party imports
from pydantic import BaseModel

# Local application imports
from app.models.base import Base


def update_model_fields(model_instance: Base, update_data: BaseModel) -> None:
    """
    Copy the fields the client actually sent from a PATCH schema onto an ORM instance.
    Fields the model does not have are ignored.
    """
    for field, value in update_data.model_dump(exclude_unset=True).items():
        if hasattr(model_instance, field):
            setattr(model_instance, field, value)
