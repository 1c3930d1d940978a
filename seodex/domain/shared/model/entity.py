from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Mutable domain object; assignments are validated against field types."""

    model_config = ConfigDict(validate_assignment=True)
