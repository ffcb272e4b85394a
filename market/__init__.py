# Market module
from .tiers import (
    ValueBands,
    ValueTier,
    compute_bands,
    value_tier,
)
