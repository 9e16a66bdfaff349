"""
Common logging point for the package.

countable is a library - so it never configures logging itself. Everything goes through the default log, which has a
NullHandler attached. Applications which want to see the output should configure the "countable-default-log" logger
(or the root logger) in the usual way.
"""

import logging

from countable.constants import DEFAULT_LOG_NAME


default_log = logging.getLogger(DEFAULT_LOG_NAME)
default_log.addHandler(logging.NullHandler())


def get_logger(name=None):
    """
    Return the default log - or a child of it, if a name is given.

    :param name: Suffix for a child logger (e.g. "matcher" -> "countable-default-log.matcher")
    :return:
    """
    if not name:
        return default_log
    return default_log.getChild(name)
