from .domain.config import RenumberConfig
from .domain.models import ProtectedRange

__all__ = ["ProtectedRange", "RenumberConfig"]
