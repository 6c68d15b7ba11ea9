from pydantic import BaseModel, ConfigDict


class ProfileBaseModel(BaseModel):
    """
    Base data structure for the power profile entries. Entries are immutable once loaded, so they can be read
    concurrently without locking.
    """
    model_config = ConfigDict(frozen=True)
