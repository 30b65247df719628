# polygeom/utils/base_model.py
from pydantic import BaseModel


class ImmutableModel(BaseModel):
    """
    Base class for the geometry value types.

    Instances are frozen after creation: assigning to a field raises, and
    frozen models are hashable so equal values can share set and dict slots.
    """
    model_config = {
        "frozen": True,
    }
