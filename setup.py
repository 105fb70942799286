# Copyright (c) 2021 Nordic Semiconductor ASA
#
# SPDX-License-Identifier: BSD-3-Clause

from pathlib import Path

import setuptools

here = Path(__file__).parent

with open(here / 'README.md', 'r') as f:
    long_description = f.read()

with open(here / 'dtsugar' / 'VERSION', 'r') as f:
    # This is option 3 in:
    # https://packaging.python.org/guides/single-sourcing-package-version/
    version = f.read().strip()

setuptools.setup(
    name='dtsugar',
    version=version,
    author='Bruce Ashfield',
    author_email='bruce.ashfield@gmail.com',
    description='A devicetree overlay fragment to syntactic sugar converter',
    license='BSD',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: BSD License',
        'Operating System :: POSIX :: Linux',
    ],
    packages=setuptools.find_packages(include=('dtsugar',)),
    package_data={ 'dtsugar': [ 'VERSION', 'dtsugar.ini' ] },
    python_requires='>=3.6',
    include_package_data=True,
    install_requires=[ "humanfriendly","configparser" ],
    extras_require={ "test": ["pytest"] },
    entry_points={'console_scripts': ('dtsugar = dtsugar.__main__:main',)},
)
