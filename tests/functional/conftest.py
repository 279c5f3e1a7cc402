from fixtures.api import *  # noqa: F401, F403
from fixtures.es import *  # noqa: F401, F403
from fixtures.storage import *  # noqa: F401, F403
