#/*
# * Copyright (c) 2019,2020 Xilinx Inc. All rights reserved.
# *
# * Author:
# *       Bruce Ashfield <bruce.ashfield@xilinx.com>
# *
# * SPDX-License-Identifier: BSD-3-Clause
# */

class LineEmitter():
    """Sink for the converted line stream

    Lines are written as they are emitted, so output produced before a
    fatal error is not lost. A copy of every line is kept in 'lines'.

    Attributes:
       - output (file): the stream written to, None only keeps the lines
       - lines (list): every emitted line, without line terminators

    """
    def __init__( self, output = None ):
        self.output = output
        self.lines = []

    def emit( self, text ):
        self.lines.append( text )
        if self.output:
            self.output.write( text + "\n" )
