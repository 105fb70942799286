#/*
# * Copyright (c) 2019,2020 Xilinx Inc. All rights reserved.
# *
# * Author:
# *       Bruce Ashfield <bruce.ashfield@xilinx.com>
# *
# * SPDX-License-Identifier: BSD-3-Clause
# */

#
# dtsugar conversion
#
# Rewrites an overlay written with explicit fragment@N / __overlay__
# wrapper nodes into the syntactic sugar form, where each wrapper pair
# becomes a single node named by its target:
#
#    / {                                    &i2c1 {
#        fragment@0 {                           status = "okay";
#            target = <&i2c1>;         =>   };
#            __overlay__ {
#                status = "okay";
#            };
#        };
#    };
#
# No tree is built. Lines are classified by shape and the converter
# tracks node depth and fragment context as it streams.
#

from dtsugar.line import LineShape, classify
from dtsugar.indent import indent_fix
from dtsugar.diag import Diagnostics, ExitStatus, FatalConversionError
from dtsugar.emit import LineEmitter
from dtsugar.config import ConvertOptions
import dtsugar.log

dtsugar.log._init( __name__ )

root_block_open = "/ {"
root_block_close = "};"

class OverlayConverter():
    """Class implementing the line by line overlay conversion

    Lines are passed to feed() in document order, and finish() is called
    at the end of the input. Output is written to the emitter as it is
    decided, and diagnostics are recorded in 'diag'.

    Attributes:
       - options (ConvertOptions): force, indent_fix and verbose settings
       - emitter (LineEmitter): where converted lines are written
       - diag (Diagnostics): error, warning and root property accounting
       - depth (int): the current node depth, the root node is depth 1
       - fragment_stack (list): depths of the open fragment@N nodes
       - pending_target (tuple): (LineShape,value) of the target property
                                 waiting for its __overlay__ node, or None
       - in_fragment (bool): True between a fragment open and its close
       - fragment_name (string): the current fragment node, with its label
       - in_root_block (bool): a synthesized "/ {" block is open
       - root_elided (bool): the open depth 1 node is the (elided) root
       - skip_depth (int): depth of a dropped subtree, 0 when not skipping
       - lines_read (int): lines passed to feed()
       - bytes_read (int): size of the lines passed to feed()

    """
    def __init__( self, options = None, emitter = None, diag = None ):
        if options is None:
            options = ConvertOptions()
        if emitter is None:
            emitter = LineEmitter()
        if diag is None:
            diag = Diagnostics( options.verbose )

        self.options = options
        self.emitter = emitter
        self.diag = diag

        self.depth = 0
        self.fragment_stack = []
        self.pending_target = None
        self.in_fragment = False
        self.fragment_name = ""
        self.in_root_block = False
        self.root_elided = False
        self.skip_depth = 0

        self.lines_read = 0
        self.bytes_read = 0

    def feed( self, line ):
        """Process one line of overlay source

        Args:
           line (string): the line, with or without its line terminator

        Returns:
           Nothing

        Raises:
           FatalConversionError: for an illegal node name or an __overlay__
                                 node without a target, when force is off
        """
        self.lines_read += 1
        self.bytes_read += len( line.encode( "utf-8" ) )

        # target properties only count directly inside the fragment node
        targets_allowed = self.in_fragment and self.fragment_stack and \
                          self.fragment_stack[-1] == self.depth

        cl = classify( line, targets_allowed, self.lines_read )

        dtsugar.log._debug( f"line {cl.number}: depth: {self.depth} shape: {cl.shape.name} "
                            f"name: '{cl.name}' fragment: {self.in_fragment}" )

        if self.skip_depth:
            self._skip( cl )
        elif cl.shape == LineShape.NODE_OPEN:
            self._node_open( cl )
        elif cl.shape == LineShape.NODE_CLOSE:
            self._node_close( cl )
        elif cl.shape in (LineShape.TARGET, LineShape.TARGET_PATH):
            self._target( cl )
        else:
            self._plain( cl )

    def finish( self ):
        """Complete the conversion at the end of the input

        Returns:
           ExitStatus: the exit status of the conversion
        """
        if self.in_root_block:
            self._root_block_end()

        if self.depth != 0:
            dtsugar.log._debug( f"input ended at depth {self.depth}" )

        return self.diag.exit_status()

    def _emit( self, text ):
        self.emitter.emit( text )

    def _fixed( self, text ):
        return indent_fix( text, self.depth, self.options.indent_fix )

    def _root_block_end( self ):
        self._emit( root_block_close )
        self.in_root_block = False

    def _skip( self, cl ):
        # a dropped subtree, only the depth is tracked until it closes
        if cl.shape == LineShape.NODE_OPEN:
            self.depth += 1
        elif cl.shape == LineShape.NODE_CLOSE:
            if self.depth == self.skip_depth:
                self.skip_depth = 0
            self.depth -= 1

    def _node_open( self, cl ):
        self.depth += 1

        # a second level node ends any run of root properties
        if self.depth == 2 and self.in_root_block:
            self._root_block_end()

        if self.depth == 2 and cl.is_fragment():
            self.in_fragment = True
            self.fragment_name = f"{cl.label}: {cl.name}" if cl.label else cl.name
            self.pending_target = None
            self.fragment_stack.append( self.depth )
        elif cl.is_overlay():
            self._overlay_open( cl )
        elif cl.is_reserved():
            message = f"illegal node name '{cl.name}'"
            if not self.options.force:
                raise self.diag.fatal( ExitStatus.ILLEGAL_NODE, message, cl.number )

            self.diag.error( message + ", dropping node", cl.number )
            self.skip_depth = self.depth
        elif self.depth == 1:
            # the root node is elided, other top level nodes (already
            # converted &label nodes) are passed through
            self.root_elided = cl.name == "/"
            if not self.root_elided:
                self._emit( cl.text )
        else:
            self._emit( self._fixed( cl.text ) )

    def _overlay_open( self, cl ):
        if self.pending_target:
            shape, value = self.pending_target
            self.pending_target = None
            self._emit( self._fixed( f"{cl.indent}{value} {{" ) )
            return

        message = f"no 'target' property in node {self.fragment_name or '/'}"
        if not self.options.force:
            raise self.diag.fatal( ExitStatus.MISSING_TARGET, message, cl.number )

        self.diag.error( message, cl.number )
        self._emit( self._fixed( f"{cl.indent}/* ERROR: {message} */" ) )
        self._emit( self._fixed( cl.text ) )

    def _node_close( self, cl ):
        popped = None
        if self.fragment_stack:
            popped = self.fragment_stack.pop()

        if popped is not None and popped == self.depth:
            # the fragment wrapper, its brace is elided
            if self.pending_target:
                dtsugar.log._debug( f"{self.fragment_name}: unused target '{self.pending_target[1]}' discarded" )
            self.in_fragment = False
            self.pending_target = None
            self.fragment_name = ""
        else:
            if popped is not None:
                self.fragment_stack.append( popped )

            if self.depth == 1 and self.root_elided:
                if self.in_root_block:
                    self._root_block_end()
                self.root_elided = False
            elif self.depth <= 0:
                # unbalanced input, pass the brace through
                self._emit( cl.text )
                return
            else:
                self._emit( self._fixed( cl.text ) )

        self.depth -= 1

    def _target( self, cl ):
        # the later of target / target-path wins
        self.pending_target = (cl.shape, cl.value)
        if cl.shape == LineShape.TARGET_PATH:
            self.diag.warning( f"target-path not supported (\"{cl.value}\" in {self.fragment_name})",
                               cl.number )

    def _plain( self, cl ):
        if not self.in_fragment and self.depth == 1 and self.root_elided and cl.is_property():
            if not self.in_root_block:
                self.in_root_block = True
                self._emit( root_block_open )

            self.diag.root_property( cl.text.strip(), cl.number )

        self._emit( self._fixed( cl.text ) )


class ConversionResult():
    """The outcome of a conversion

    Attributes:
       - lines (list): the emitted lines, without line terminators
       - diag (Diagnostics): the diagnostics of the conversion
       - exit_status (ExitStatus): the exit status for the conversion
       - fatal (FatalConversionError): the error that stopped the
                                       conversion, or None

    """
    def __init__( self, lines, diag, exit_status, fatal = None ):
        self.lines = lines
        self.diag = diag
        self.exit_status = exit_status
        self.fatal = fatal

    def text( self ):
        if not self.lines:
            return ""
        return "\n".join( self.lines ) + "\n"


def convert( lines, options = None, output = None ):
    """Convert an expanded overlay to the syntactic sugar form

    A fatal error stops the conversion at the offending line. It is
    returned in the result rather than raised, and the lines emitted
    before it are kept.

    Args:
       lines (iterable): the overlay source lines (a file object works)
       options (ConvertOptions,optional): conversion options
       output (file,optional): stream to write converted lines to

    Returns:
       ConversionResult: emitted lines, diagnostics and exit status
    """
    if options is None:
        options = ConvertOptions()

    emitter = LineEmitter( output )
    converter = OverlayConverter( options, emitter )

    fatal = None
    try:
        for line in lines:
            converter.feed( line )
        exit_status = converter.finish()
    except FatalConversionError as e:
        fatal = e
        exit_status = e.exit_status

    dtsugar.log._info( converter.diag.summary( converter.lines_read, converter.bytes_read ),
                       options.verbose )

    return ConversionResult( emitter.lines, converter.diag, exit_status, fatal )
