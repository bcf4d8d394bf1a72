# Pydantic schemas package
from modules.schemas.dashboard import (
    Action,
    AgentsSum,
    Collection,
    CollectionItem,
    DataField,
    Envelope,
    Investigator,
)

__all__ = [
    "Action",
    "AgentsSum",
    "Collection",
    "CollectionItem",
    "DataField",
    "Envelope",
    "Investigator",
]
