#/*
# * Copyright (c) 2019,2020 Xilinx Inc. All rights reserved.
# *
# * Author:
# *       Bruce Ashfield <bruce.ashfield@xilinx.com>
# *
# * SPDX-License-Identifier: BSD-3-Clause
# */

from pathlib import Path

from dtsugar.line import LineShape, ClassifiedLine, classify
from dtsugar.indent import indent_fix
from dtsugar.diag import Diagnostics, ExitStatus, ConversionError, ConfigError, FatalConversionError
from dtsugar.emit import LineEmitter
from dtsugar.config import ConvertOptions, load_config
from dtsugar.convert import OverlayConverter, ConversionResult, convert

with open(Path(__file__).parent / 'VERSION', 'r') as f:
    __version__ = f.read().strip()
