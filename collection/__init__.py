# Collection module
from .manager import (
    FunkoCollectionManager,
    CollectionResult,
    ModifyPolicy,
)
