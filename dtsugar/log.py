#/*
# * Copyright (c) 2023 Advanced Micro Devices, Inc. All Rights Reserved.
# *
# * Author:
# *       Bruce Ashfield <bruce.ashfield@amd.com>
# *
# * SPDX-License-Identifier: BSD-3-Clause
# */

import logging
import sys

class _stderr_handler( logging.StreamHandler ):
    """StreamHandler that always writes to the current sys.stderr

    sys.stderr can be replaced after a logger is initialized (redirection,
    test capture), so the stream is looked up on every emit instead of
    being bound when the handler is created.
    """
    @property
    def stream( self ):
        return sys.stderr

    @stream.setter
    def stream( self, value ):
        pass

root_logger = logging.getLogger()
if not root_logger.handlers:
    _root_handler = _stderr_handler()
    _root_handler.setFormatter( logging.Formatter( '[%(levelname)s]: %(message)s' ) )
    root_logger.addHandler( _root_handler )

def init( verbose ):
    # iterate registered loggers and set their level to a consistent
    # value, the root logger is set to match.
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    loggers = logging.root.manager.loggerDict.items()
    for lname,logger in loggers:
        if type(logger) == logging.Logger and lname.startswith( "dtsugar" ):
            logger.setLevel( level )

    logging.getLogger().setLevel( level )

def _init( name ):
    """
    Initalize a logger for a given name.

    This is typically called with __name__ to intialize a logger
    for a given file (subsystem).

    When called, a formatter is setup that includes the passed name
    and then the standard level and messages.

    All calls using that name (configured logger) will use that
    formatting. Calling it more than once for a name is harmless.

    Args:
       name (string): the name of the logger

    Returns:
       Logger: the configured logger
    """
    l = logging.getLogger( name )
    if name and not l.handlers:
        formatter = logging.Formatter('[%(name)s][%(levelname)s]: %(message)s' )
        ch = _stderr_handler()
        ch.setFormatter( formatter )
        l.addHandler( ch )
        l.propagate = False

    return l

def _warning( message, logger = None ):
    """
    output a warning message

    A logger looked up by __logger__() is used to output a message.
    If no specific named logger has been initialized, the default
    root logger is used.

    Args:
        message (string): the string to output
        logger (Logger,optional): the logger to use, otherwise, look it up

    Returns:
        None
    """
    if not logger:
        logger = __logger__()
    logger.warning( message )

def _info( message, output_if_true = True, logger = None ):
    """
    output an informational message

    Args:
        message (string): the string to output
        output_if_true (bool,optional): flag indicating if the message should be output
        logger (Logger,optional): the logger to use, otherwise, look it up

    Returns:
        None
    """
    if not logger:
        logger = __logger__()

    if output_if_true:
        logger.info( message )

def _error( message, logger = None ):
    """
    output an error message

    Args:
        message (string): the string to output
        logger (Logger,optional): the logger to use, otherwise, look it up

    Returns:
        None
    """
    if not logger:
        logger = __logger__()

    logger.error( message )

def _debug( message, logger = None ):
    """
    output a debug message

    Args:
        message (string): the string to output
        logger (Logger,optional): the logger to use, otherwise, look it up

    Returns:
        None
    """
    if not logger:
        logger = __logger__()

    logger.debug( message )


## internal calls only, since this pokes at the call stack and is
## expected to find the caller two deep.
def __logger__():
    """
    look for a configured logger

    Rather than requiring all calls to the utility functions to pass a
    logger or a name (which would typically be __name__), we look at the
    call stack to find the __name__ of the calling python module, and
    check to see if _init() has been called for that module.

    if _init() has been called, we return the logger, otherwise, we return
    the root logger and use the defaults.

    Args:
        None

    Returns:
        Logger
    """
    x = sys._getframe().f_back.f_back.f_globals.get( "__name__", "" )
    if x in logging.root.manager.loggerDict:
        return logging.getLogger( x )

    return root_logger
