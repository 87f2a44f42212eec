#!/usr/bin/env python

'''
A simple logging module that logs to the console and optionally a logfile,
and has a configurable threshold loglevel for each of console and logfile
output.

Use it this way:
    import mandelgrid.utilities.log as log

    # configure my logging
    log.console_logging_level = log.INFO
    log.log_logging_level = log.DEBUG
    log.log_filename = './mandelgrid.log'

    # log away!
    log.debug('A message at DEBUG level')
    log.info('Another message, INFO level')

This module uses the 'borg' pattern - there is never more than one instance
of log data.  Modules *are* singletons!

Handlers are installed by setup(), which scripts call once the module data
is configured.  Until then records from library code go to the standard
logging machinery unchanged, so nothing is printed below WARNING.  Console
output goes to stderr, leaving stdout to the data a script writes.
'''

import os
import sys
import traceback
import logging

DefaultConsoleLogLevel = logging.CRITICAL
DefaultFileLogLevel = logging.INFO
TimingDelimiter = '#@# '

################################################################################
# Module variables - only one copy of these, ever.
#
# The console logging level is set to a high level, like CRITICAL.  The logfile
# logging is set lower, between DEBUG and CRITICAL.  The idea is to log least to
# the console, but ensure that everything that goes to the console *will* also
# appear in the log file.  There is code to ensure log <= console levels.
#
# If console logging level is set to CRITICAL+1 then nothing will print on the
# console.
################################################################################

# flag variable to determine if logging set up or not
_setup = False

# logging level for the console
console_logging_level = DefaultConsoleLogLevel

# logging level for the logfile
log_logging_level = DefaultFileLogLevel

# The name of the file to log to, None for console only
log_filename = None

# name of the logger all records go through
logger_name = 'mandelgrid'

# set module variables so users don't have to do 'import logging'.
CRITICAL = logging.CRITICAL
ERROR = logging.ERROR
WARNING = logging.WARNING
INFO = logging.INFO
DEBUG = logging.DEBUG
NOTSET = logging.NOTSET


################################################################################
# Module code.
################################################################################

def _get_logger():
    return logging.getLogger(logger_name)


def setup():
    '''Install the console and logfile handlers.

    Calling setup() again without reset() in between does nothing.
    '''

    global _setup, log_logging_level

    logger = _get_logger()

    if not _setup:
        # sanity check the logging levels, require console >= file
        if log_logging_level > console_logging_level:
            log_logging_level = console_logging_level

        logger.setLevel(min(log_logging_level, console_logging_level))
        logger.propagate = False

        # setup the file logging system
        if log_filename is not None:
            fmt = '%(asctime)s %(levelname)-8s %(mname)25s:%(lnum)-4d|%(message)s'
            logfile = logging.FileHandler(log_filename, mode='w')
            logfile.setLevel(log_logging_level)
            logfile.setFormatter(logging.Formatter(fmt))
            logger.addHandler(logfile)

        # define a console handler which writes to sys.stderr
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(console_logging_level)
        console.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(console)

        # catch exceptions
        sys.excepthook = log_exception_hook

        # tell the world how we are set up
        start_msg = ("Logfile is '%s' with logging level of %s, "
                     "console logging level is %s"
                     % (log_filename,
                        logging.getLevelName(log_logging_level),
                        logging.getLevelName(console_logging_level)))
        logger.log(logging.INFO, start_msg,
                   extra={'mname': __name__, 'lnum': 0})

        # mark module as *setup*
        _setup = True


def log(msg, level=None):
    '''Log a message at a particular loglevel.

    msg:    The message string to log.
    level:  The logging level to log with (defaults to console level).
    '''

    logger = _get_logger()

    # if logging level not supplied, assume console level
    if level is None:
        level = console_logging_level

    # get caller information - look back for first module != <this module name>
    fname = ''
    lnum = 0
    frames = traceback.extract_stack()
    frames.reverse()
    try:
        (_, mod_name) = __name__.rsplit('.', 1)
    except ValueError:
        mod_name = __name__
    for (fpath, lnum, mname, _) in frames:
        fname = os.path.splitext(os.path.basename(fpath))[0]
        if fname != mod_name:
            break

    logger.log(level, msg, extra={'mname': fname, 'lnum': lnum})


def reset():
    '''Remove installed handlers so setup() can be called again.'''

    global _setup

    logger = _get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)

    if sys.excepthook is log_exception_hook:
        sys.excepthook = sys.__excepthook__

    _setup = False


def log_exception_hook(type, value, tb):
    '''Hook function to process uncaught exceptions.

    type:   Type of exception.
    value:  The exception data.
    tb:     Traceback object.

    This has the same interface as sys.excepthook().
    '''

    msg = '\n' + ''.join(traceback.format_exception(type, value, tb))
    critical(msg)


################################################################################
# Shortcut routines to make for simpler user code.
################################################################################

def debug(msg=''):
    '''Shortcut for log(DEBUG, msg).'''

    log(msg, logging.DEBUG)


def info(msg=''):
    '''Shortcut for log(INFO, msg).'''

    log(msg, logging.INFO)


def warning(msg=''):
    '''Shortcut for log(WARNING, msg).'''

    log(msg, logging.WARNING)


def error(msg=''):
    '''Shortcut for log(ERROR, msg).'''

    log(msg, logging.ERROR)


def critical(msg=''):
    '''Shortcut for log(CRITICAL, msg).'''

    log(msg, logging.CRITICAL)


def timingInfo(msg=''):
    '''Shortcut for log(timingDelimiter, msg).'''

    log(TimingDelimiter + msg, logging.INFO)

