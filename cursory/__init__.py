r"""
'    _________
'    \_   ___ \ __ _________  _________________ ___.__.
'    /    \  \/|  |  \_  __ \/  ___/  _ \_  __ <   |  |
'    \     \___|  |  /|  | \/\___ (  <_> )  | \/\___  |
'     \______  /____/ |__|  /____  >____/|__|   / ____|
'            \/                  \/             \/
"""

import logging

# expose the cursor protocol
from .enumerators import IEnumerator, ArrayEnumerator, MapEnumerator, FindAllEnumerator

# expose the main classes
from .enumerable import IEnumerable, Enumerable, ArrayEnumerable, MapEnumerable, FindAllEnumerable

# expose the factory functions
from .factories import (
    from_list,
    from_range,
    repeat,
    empty,
    A
)

# expose the sentinel
from .types import NO_VALUE, is_no_value

# silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "IEnumerator",
    "ArrayEnumerator",
    "MapEnumerator",
    "FindAllEnumerator",
    "IEnumerable",
    "Enumerable",
    "ArrayEnumerable",
    "MapEnumerable",
    "FindAllEnumerable",
    "from_list",
    "from_range",
    "repeat",
    "empty",
    "A",
    "NO_VALUE",
    "is_no_value"
]
