"""Odlink library module for logging

Description:
------------

This module provides simple logging inside odlink. To write a log message, simply call one of odlink.log-functions
corresponding to the log levels defined in odlink.lib.enums. The builders in :mod:`odlink.partials.create` log each
created partial at the debug level, each assembled link at the info level, and links or corrections that are only
partly handled at the warn level.


Example:
--------

    >>> from odlink.lib import log
    >>> log.init("info", prefix="My prefix")
    >>> n = 5
    >>> log.info(f"Created observation partials for {n:>2d} parameters")
    INFO  [My prefix] Created observation partials for  5 parameters

"""

# Standard library imports
import functools

# Midgard imports
from midgard.dev import log as mg_log

# Odlink imports
from odlink.lib import enums  # Log levels and colors for odlink

# Make functions from Midgard available
from midgard.dev.log import init, log  # noqa


# Make each log level available as a function, done here to include the odlink log levels
for level in enums.get_enum("log_level"):
    globals()[level.name] = functools.partial(mg_log.log, level=level.name)
