"""
System level constants - the few knobs countable has.
"""

# Uses semantic versioning - see https://semver.org/
__license__ = "MIT"
__appname__ = "countable"


COUNTABLE_NUMERIC_VERSION = (0, 1, 0)
__version__ = ".".join(map(str, COUNTABLE_NUMERIC_VERSION))


# Name of the logger every module in the package writes to
DEFAULT_LOG_NAME = "countable-default-log"


# These constants control the mode countable is running in
# ALTER WITH CARE - DOING SO AFFECTS BEHAVIORS THROUGHOUT THE SYSTEM.

# If True, the match engine logs which rule decided every lookup - very noisy
VERBOSE_DEBUG = False


# The one count which selects the singular form - everything else (0 and negatives included) is plural
SINGULAR_COUNT = 1
