__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'printfy'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .context import *
from .directives import *
from .dispatch import *
from .faults import *
from .formatting import *
from .streams import *
from .values import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the formatting context
__all__ += context.__all__  # type: ignore[attr-defined]
# Load the exposed API of the directive scanner and interpreter
__all__ += directives.__all__  # type: ignore[attr-defined]
# Load the exposed API of the value dispatcher
__all__ += dispatch.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the entry points
__all__ += formatting.__all__  # type: ignore[attr-defined]
# Load the exposed API of the output sink
__all__ += streams.__all__  # type: ignore[attr-defined]
# Load the exposed API of the rendering hooks
__all__ += values.__all__  # type: ignore[attr-defined]
