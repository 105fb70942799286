#/*
# * Copyright (c) 2019,2020 Xilinx Inc. All rights reserved.
# *
# * Author:
# *       Bruce Ashfield <bruce.ashfield@xilinx.com>
# *
# * SPDX-License-Identifier: BSD-3-Clause
# */

import re
from enum import Enum

# used to tag each input line
class LineShape(Enum):
    """Enum class to define the shapes a line of overlay source can take
    """
    NODE_OPEN = 1
    NODE_CLOSE = 2
    TARGET = 3
    TARGET_PATH = 4
    PLAIN = 5

# the small, fixed grammar that lines are matched against
fragment_node_regex = re.compile( r'^fragment@\d+$' )
overlay_node_name = "__overlay__"
target_regex = re.compile( r'^\s*target\s*=\s*<([^>]*)>\s*;' )
target_path_regex = re.compile( r'^\s*target-path\s*=\s*"([^"]*)"' )
property_assign_regex = re.compile( r'^\s*[A-Za-z0-9,._+#?-]+\s*=' )
node_label_regex = re.compile( r'^([A-Za-z_][A-Za-z0-9_]*)\s*:\s*(.*)$' )

class ClassifiedLine():
    """Class representing one classified line of overlay source

    Attributes:
       - shape (LineShape): the shape tag of the line
       - text (string): the line, without its line terminator
       - indent (string): the run of leading whitespace
       - name (string): NODE_OPEN only, the node name (label removed)
       - label (string): NODE_OPEN only, the node label, if any
       - value (string): TARGET / TARGET_PATH only, the extracted value
       - number (int): the 1-based line number in the input, if known

    """
    def __init__( self, shape, text, indent = "", name = "", label = "", value = "", number = 0 ):
        self.shape = shape
        self.text = text
        self.indent = indent
        self.name = name
        self.label = label
        self.value = value
        self.number = number

    def __repr__( self ):
        return "ClassifiedLine(%s, %r)" % (self.shape.name, self.text)

    def is_fragment( self ):
        """True if this line opens a fragment@<N> node"""
        return self.shape == LineShape.NODE_OPEN and bool( fragment_node_regex.match( self.name ) )

    def is_overlay( self ):
        return self.shape == LineShape.NODE_OPEN and self.name == overlay_node_name

    def is_reserved( self ):
        """True if this line opens a node with an underscore prefixed name

        Names such as __symbols__, __fixups__ and __local_fixups__ are
        generated by the compiler and are illegal in overlay source.
        __overlay__ is also reserved, callers check for it first.
        """
        return self.shape == LineShape.NODE_OPEN and self.name.startswith( "_" )

    def is_property( self ):
        """True if the line is a property assignment (<name> = ...)"""
        return bool( property_assign_regex.match( self.text ) )


def leading_whitespace( text ):
    return text[:len(text) - len(text.lstrip())]

def node_name_split( node_spec ):
    """Split the text before a '{' into a label and a node name

    Args:
       node_spec (string): text such as "frag0: fragment@0" or "&i2c1"

    Returns:
       tuple: (label,name). label is "" when the node has none
    """
    node_spec = node_spec.strip()
    # references and paths (&foo, &{/path}) may not carry a label
    if node_spec.startswith( "&" ) or node_spec.startswith( "/" ):
        return "", node_spec

    m = node_label_regex.match( node_spec )
    if m:
        return m.group(1), m.group(2).strip()

    return "", node_spec

def classify( line, in_fragment = False, number = 0 ):
    """Classify a line of overlay source by its shape

    Rules, in priority order:
       - a line containing '{' opens a node
       - a line containing '}' closes a node
       - inside a fragment: 'target = <...>;' and 'target-path = "...";'
         are target properties
       - anything else is a plain line

    Args:
       line (string): the raw line, a trailing line terminator is allowed
       in_fragment (bool,optional): whether target properties are recognized
       number (int,optional): the line number, carried for diagnostics

    Returns:
       ClassifiedLine: the classified line
    """
    text = line.rstrip( "\r\n" )
    indent = leading_whitespace( text )

    if "{" in text:
        node_spec = text.rsplit( "{", 1 )[0]
        label, name = node_name_split( node_spec )
        return ClassifiedLine( LineShape.NODE_OPEN, text, indent, name = name,
                               label = label, number = number )

    if "}" in text:
        return ClassifiedLine( LineShape.NODE_CLOSE, text, indent, number = number )

    if in_fragment:
        m = target_regex.match( text )
        if m:
            return ClassifiedLine( LineShape.TARGET, text, indent,
                                   value = m.group(1).strip(), number = number )

        m = target_path_regex.match( text )
        if m:
            return ClassifiedLine( LineShape.TARGET_PATH, text, indent,
                                   value = m.group(1), number = number )

    return ClassifiedLine( LineShape.PLAIN, text, indent, number = number )
