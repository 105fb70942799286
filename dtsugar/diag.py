#/*
# * Copyright (c) 2019,2020 Xilinx Inc. All rights reserved.
# *
# * Author:
# *       Bruce Ashfield <bruce.ashfield@xilinx.com>
# *
# * SPDX-License-Identifier: BSD-3-Clause
# */

#
# dtsugar diagnostics
#
# Error and warning accounting for a conversion, the process exit status
# policy and the exception types raised by the converter.
#

from enum import IntEnum

from humanfriendly import format_size
from humanfriendly.text import pluralize

import dtsugar.log

dtsugar.log._init( __name__ )

class ExitStatus(IntEnum):
    """Process exit status values

    0-2 are decided before or outside of a conversion, 3 and 10 at the end
    of a completed conversion and 11/12 by a fatal error.
    """
    OK = 0
    BAD_ARGS = 1
    BAD_INPUT = 2
    WARNINGS = 3
    FORCED_ERRORS = 10
    ILLEGAL_NODE = 11
    MISSING_TARGET = 12


class ConversionError(Exception):
    """Base class of all dtsugar errors"""
    pass


class ConfigError(ConversionError):
    """Invalid or unreadable configuration"""
    exit_status = ExitStatus.BAD_ARGS


class FatalConversionError(ConversionError):
    """A structural error that stops a conversion (force mode is off)

    Attributes:
       - exit_status (ExitStatus): the status the process should exit with
       - line_number (int): the input line where the error was found
       - message (string): the diagnostic, without the line number

    """
    def __init__( self, exit_status, message, line_number = 0 ):
        self.exit_status = exit_status
        self.message = message
        self.line_number = line_number
        super().__init__( "line %s: %s" % (line_number, message) )


class Diagnostics():
    """Accumulates the errors and warnings of a conversion

    Counters are only ever incremented. Every reported diagnostic is also
    kept in 'messages' as a (level,text) tuple, in the order reported.

    Attributes:
       - errors (int): errors reported (force mode only, others are fatal)
       - warnings (int): warnings reported
       - root_properties (int): properties found directly in the root node
       - messages (list): (level,text) tuples, level is "error" or "warning"
       - verbose (int): verbosity level, non-zero reports every warning

    """
    def __init__( self, verbose = 0 ):
        self.errors = 0
        self.warnings = 0
        self.root_properties = 0
        self.messages = []
        self.verbose = verbose

    def error( self, message, line_number = 0 ):
        """Count and report an error"""
        self.errors += 1
        message = self._located( message, line_number )
        self.messages.append( ("error", message) )
        dtsugar.log._error( message )

    def warning( self, message, line_number = 0 ):
        """Count and report a warning"""
        self.warnings += 1
        message = self._located( message, line_number )
        self.messages.append( ("warning", message) )
        dtsugar.log._warning( message )

    def root_property( self, name, line_number = 0 ):
        """Record a property found directly in the root node

        Every root property is counted, but only the first one is warned
        about unless verbose mode is on.

        Args:
           name (string): the property assignment, used in the warning
           line_number (int,optional): the input line number

        Returns:
           bool: True if a warning was reported
        """
        self.root_properties += 1
        if self.verbose or self.root_properties == 1:
            self.warning( "property '%s' found in root node" % name, line_number )
            return True

        return False

    def fatal( self, exit_status, message, line_number = 0 ):
        """Report a fatal error and return the exception to raise"""
        self.errors += 1
        located = self._located( message, line_number )
        self.messages.append( ("error", located) )
        dtsugar.log._error( located )
        return FatalConversionError( exit_status, message, line_number )

    def exit_status( self ):
        """The exit status of a conversion that ran to the end of its input

        Errors take priority over warnings.

        Returns:
           ExitStatus: FORCED_ERRORS, WARNINGS or OK
        """
        if self.errors:
            return ExitStatus.FORCED_ERRORS
        if self.warnings:
            return ExitStatus.WARNINGS

        return ExitStatus.OK

    def summary( self, lines_read = 0, bytes_read = 0 ):
        """A one line, human readable summary of the conversion"""
        return "converted %s (%s): %s, %s, %s" % ( pluralize( lines_read, "line" ),
                                                  format_size( bytes_read ),
                                                  pluralize( self.errors, "error" ),
                                                  pluralize( self.warnings, "warning" ),
                                                  pluralize( self.root_properties, "root property",
                                                             "root properties" ) )

    def _located( self, message, line_number ):
        if line_number:
            return "line %s: %s" % (line_number, message)
        return message
