"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

ENDPOINT_DEFAULT: Final = "http://localhost:8080/api"
CONFIG_FILENAME_DEFAULT: Final = "panmon.json"

__all__ = [
    "CONFIG_FILENAME_DEFAULT",
    "ENDPOINT_DEFAULT",
]
