#/*
# * Copyright (c) 2019,2020 Xilinx Inc. All rights reserved.
# *
# * Author:
# *       Bruce Ashfield <bruce.ashfield@xilinx.com>
# *
# * SPDX-License-Identifier: BSD-3-Clause
# */

import configparser
import os
from pathlib import Path

from dtsugar.diag import ConfigError

dtsugar_directory = os.path.dirname(os.path.realpath(__file__))
default_config_file = f"{dtsugar_directory}/dtsugar.ini"

class ConvertOptions():
    """Options that change how an overlay is converted

    Attributes:
       - force (bool): downgrade illegal nodes and missing targets to
                       counted errors instead of stopping
       - indent_fix (bool): remove the indentation of elided wrappers
       - verbose (int): verbosity level. Any non-zero level reports every
                        warning and a summary, 2 and above adds a trace

    """
    def __init__( self, force = False, indent_fix = True, verbose = 0 ):
        self.force = force
        self.indent_fix = indent_fix
        self.verbose = verbose

    def __repr__( self ):
        return "ConvertOptions(force=%s, indent_fix=%s, verbose=%s)" % \
               (self.force, self.indent_fix, self.verbose)

    @classmethod
    def from_config( cls, config ):
        """Create options from the [options] section of a configuration

        Args:
           config (ConfigParser): the configuration, a missing section or
                                  key keeps the default

        Returns:
           ConvertOptions: the options
        """
        options = cls()
        if not config.has_section( "options" ):
            return options

        section = config["options"]
        try:
            options.force = section.getboolean( "force", fallback = False )
            options.indent_fix = not section.getboolean( "no_indent_fix", fallback = False )
            verbose = section.get( "verbose", fallback = "0" )
        except ValueError as e:
            raise ConfigError( f"invalid [options] value: {e}" )

        # verbose is a level, but a boolean is accepted as well
        try:
            options.verbose = int( verbose )
        except ValueError:
            try:
                options.verbose = 1 if config.BOOLEAN_STATES[verbose.lower()] else 0
            except KeyError:
                raise ConfigError( f"invalid [options] verbose value: {verbose}" )

        return options


def config_values_apply( config, config_vals ):
    """Apply section dotted overrides to a configuration

    Each value is of the form <section>.<key>=<value>. A value without
    '=<value>' sets the key to "True".

    Args:
       config (ConfigParser): the configuration to update
       config_vals (list): the override strings

    Returns:
       Nothing
    """
    for k in config_vals:
        config_sections = k.split( '.' )
        if len(config_sections) < 2:
            raise ConfigError( f"configuration value '{k}' has no section" )

        config_option = config_sections[-1]
        config_option_name = config_option.split('=')[0]
        config_option_val = config_option.split('=')[-1]
        if config_option_name == config_option_val:
            config_option_val = True

        for item in config_sections[:-1]:
            if not config.has_section( item ):
                config[item] = {}

            config[item][config_option_name] = str(config_option_val)

def load_config( config_file = None, config_vals = None ):
    """Read the configuration file and apply any overrides

    Args:
       config_file (string,optional): configparser file, the packaged
                                      dtsugar.ini when not passed
       config_vals (list,optional): <section>.<key>=<value> overrides

    Returns:
       ConfigParser: the configuration
    """
    config = configparser.ConfigParser()
    if not config_file:
        config_file = default_config_file

    inf = Path(config_file)
    if not inf.exists():
        raise ConfigError( f"config file {config_file} does not exist" )

    try:
        config.read( inf.absolute() )
    except configparser.Error as e:
        raise ConfigError( f"config file {config_file} could not be parsed: {e}" )

    if config_vals:
        config_values_apply( config, config_vals )

    return config
