#/*
# * Copyright (c) 2019,2020 Xilinx Inc. All rights reserved.
# *
# * Author:
# *       Bruce Ashfield <bruce.ashfield@xilinx.com>
# *
# * SPDX-License-Identifier: BSD-3-Clause
# */

import getopt
import sys
from pathlib import Path

from dtsugar import convert, ConvertOptions, load_config, ConfigError, ExitStatus

from dtsugar.log import _info, _error, _debug
import dtsugar.log

with open(Path(__file__).parent / 'VERSION', 'r') as f:
    DTSUGAR_VERSION = f.read().strip()

def usage():
    prog = "dtsugar"
    print(f'Usage: {prog} [OPTION] [<overlay dts>]')
    print('  Convert a fragment@N/__overlay__ overlay source to the syntactic sugar form.')
    print('  The overlay is read from standard input if no file (or "-") is given.')
    print('')
    print('  -f, --force         continue past illegal node names and missing targets' )
    print('    , --no-indent-fix keep the original indentation of converted nodes' )
    print('  -v, --verbose       report every warning and print a summary (specify twice for a line trace)')
    print('  -o, --output        output file (default: standard output)')
    print('    , --cfgfile       specify a dtsugar configuration file to use (configparser format) ' )
    print('    , --cfgval        specify a configuration value to use (in configparser section format). Can be specified multiple times' )
    print('  -h, --help          display this help and exit')
    print('    , --version       output the version and exit')
    print('')
    print('Exit status:')
    print('   0  no errors or warnings')
    print('   1  invalid arguments or configuration')
    print('   2  the input could not be read')
    print('   3  warnings were reported')
    print('  10  errors were reported (with --force)')
    print('  11  illegal node name')
    print('  12  __overlay__ node with no target')
    print('')

def main():
    verbose = 0
    output = ""
    force = False
    no_indent_fix = False
    config_file = None
    config_vals = []

    try:
        opts, args = getopt.getopt(sys.argv[1:], "fvho:",
                                   [ "force", "no-indent-fix", "verbose", "help",
                                     "output=", "cfgfile=", "cfgval=", "version" ] )
    except getopt.GetoptError as err:
        print(f'{str(err)}')
        usage()
        sys.exit(ExitStatus.BAD_ARGS)

    for o, a in opts:
        if o in ('-v', "--verbose"):
            verbose = verbose + 1
        elif o in ('-f', "--force"):
            force = True
        elif o == "--no-indent-fix":
            no_indent_fix = True
        elif o in ('-h', '--help'):
            usage()
            sys.exit(ExitStatus.OK)
        elif o in ('-o', '--output'):
            output = a
        elif o == '--cfgfile':
            config_file = a
        elif o == '--cfgval':
            config_vals.append( a )
        elif o == '--version':
            print( f"{DTSUGAR_VERSION}" )
            sys.exit(ExitStatus.OK)
        else:
            assert False, "unhandled option"

    if len(args) > 1:
        print( f"[ERROR]: only one input overlay can be converted, got: {' '.join(args)}\n" )
        usage()
        sys.exit(ExitStatus.BAD_ARGS)

    dtsugar.log._init( __name__ )

    try:
        config = load_config( config_file, config_vals )
        options = ConvertOptions.from_config( config )
    except ConfigError as e:
        _error( f"{e}" )
        sys.exit(ExitStatus.BAD_ARGS)

    # command line flags override the configuration
    if force:
        options.force = True
    if no_indent_fix:
        options.indent_fix = False
    if verbose:
        options.verbose = verbose

    dtsugar.log.init( options.verbose )
    _debug( f"options: {options}" )

    input_name = "<stdin>"
    if args and args[0] != "-":
        input_name = args[0]
        try:
            infile = open( input_name, "r" )
        except OSError as e:
            _error( f"input overlay {input_name} could not be opened: {e.strerror}" )
            sys.exit(ExitStatus.BAD_INPUT)
    else:
        infile = sys.stdin

    if output:
        try:
            outfile = open( output, "w" )
        except OSError as e:
            _error( f"output file {output} could not be opened: {e.strerror}" )
            if infile is not sys.stdin:
                infile.close()
            sys.exit(ExitStatus.BAD_INPUT)
    else:
        outfile = sys.stdout

    try:
        result = convert( infile, options, outfile )
    except (OSError, UnicodeDecodeError) as e:
        _error( f"input overlay {input_name} could not be read: {e}" )
        sys.exit(ExitStatus.BAD_INPUT)
    finally:
        if infile is not sys.stdin:
            infile.close()
        if output:
            outfile.close()
        else:
            outfile.flush()

    if result.fatal:
        _info( f"{input_name}: conversion stopped at line {result.fatal.line_number}", options.verbose )

    sys.exit( int(result.exit_status) )


if __name__ == "__main__":
    main()
