#/*
# * Copyright (c) 2019,2020 Xilinx Inc. All rights reserved.
# *
# * Author:
# *       Bruce Ashfield <bruce.ashfield@xilinx.com>
# *
# * SPDX-License-Identifier: BSD-3-Clause
# */

# the two tab stops of nesting added by a fragment@N + __overlay__ pair
wrapper_indent = "\t\t"

def indent_fix( text, depth, enabled = True ):
    """Remove the indentation added by an elided fragment/overlay wrapper

    When the fix is enabled and the line sits below the root (depth > 1),
    one leading occurrence of two tab characters is removed. Anything else
    is returned untouched, including lines indented with spaces or with
    fewer than two tabs.

    Args:
       text (string): the line to adjust, without its line terminator
       depth (int): the current node depth
       enabled (bool,optional): whether indentation fixing is enabled

    Returns:
       string: the adjusted line
    """
    if not enabled or depth <= 1:
        return text

    if text.startswith( wrapper_indent ):
        return text[len(wrapper_indent):]

    return text
