from .defaults import DEFAULTS
from .models import CodecOptions
from .settings import Settings

__all__ = ["DEFAULTS", "CodecOptions", "Settings"]
