from .constants import *  # noqa: F401, F403
from .errors import *  # noqa: F401, F403
from .shapes import *  # noqa: F401, F403
from .pitch import *  # noqa: F401, F403
from .interval import *  # noqa: F401, F403
from .cache import *  # noqa: F401, F403
from .notation import *  # noqa: F401, F403
