# Funko module
from .models import (
    Funko,
    FunkoType,
    FunkoGenre,
    ValidationError,
)
