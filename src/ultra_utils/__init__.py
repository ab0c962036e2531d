"""
Ultra Utils - stateless helper functions for everyday Python.

Every function is importable from the package root::

    from ultra_utils import slugify, deep_merge, format_bytes

or through its category module::

    from ultra_utils import string_utils
    string_utils.levenshtein_distance("kitten", "sitting")

The ``ultra-utils`` console script exposes the same functions on the command
line (see ``ultra_utils.cli``).
"""

__version__ = "0.1.0"

from . import (
    array_utils,
    color_utils,
    crypto_utils,
    date_utils,
    fs_utils,
    misc_utils,
    number_utils,
    object_utils,
    string_utils,
    url_utils,
    validate,
)
from .array_utils import *  # noqa: F401,F403
from .color_utils import *  # noqa: F401,F403
from .crypto_utils import *  # noqa: F401,F403
from .date_utils import *  # noqa: F401,F403
from .fs_utils import *  # noqa: F401,F403
from .misc_utils import *  # noqa: F401,F403
from .number_utils import *  # noqa: F401,F403
from .object_utils import *  # noqa: F401,F403
from .string_utils import *  # noqa: F401,F403
from .url_utils import *  # noqa: F401,F403
from .validate import *  # noqa: F401,F403

CATEGORY_MODULES = {
    "string": string_utils,
    "date": date_utils,
    "array": array_utils,
    "object": object_utils,
    "number": number_utils,
    "crypto": crypto_utils,
    "color": color_utils,
    "url": url_utils,
    "fs": fs_utils,
    "validate": validate,
    "misc": misc_utils,
}

__all__ = ["CATEGORY_MODULES"] + [
    name for module in CATEGORY_MODULES.values() for name in module.__all__
]
