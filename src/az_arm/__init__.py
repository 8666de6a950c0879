"""Azure Resource Manager clients."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("az-arm")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from az_arm.client import ArmClient  # noqa: E402
from az_arm.errors import ArmError, DeserializationError, HttpResponseError  # noqa: E402

__all__ = [
    "ArmClient",
    "ArmError",
    "DeserializationError",
    "HttpResponseError",
    "__version__",
]
