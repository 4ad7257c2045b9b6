from pydantic import BaseModel, ConfigDict

class ORMBase(BaseModel):
    """Response schema populated straight from ORM attributes.

    Read schemas built from ``User`` rows (including plain properties such as
    ``User.name``) inherit from this.
    """
    model_config = ConfigDict(from_attributes=True)
