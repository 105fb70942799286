#!/usr/bin/env python3

import sys
import subprocess
import os
from os.path import dirname, abspath, join

THIS_DIR = dirname(abspath(__file__))

my_env = os.environ.copy()
my_env["PYTHONPATH"] = THIS_DIR

result = subprocess.run([sys.executable, '-m', 'dtsugar'] + sys.argv[1:], env=my_env )
sys.exit( result.returncode )
