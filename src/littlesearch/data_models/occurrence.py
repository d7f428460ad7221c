from pydantic import BaseModel, ConfigDict, NonNegativeInt


class Occurrence(BaseModel):
    """One document's count for one keyword."""

    model_config = ConfigDict(frozen=True)

    document: str
    frequency: NonNegativeInt

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"
