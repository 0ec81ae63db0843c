from .effects import tap, tap_err
from .map import transform, transform_error

__all__ = (
    # Map
    "transform",
    "transform_error",
    # Effects
    "tap",
    "tap_err",
)
