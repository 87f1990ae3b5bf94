#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup

# importing jbin would pull in its dependencies, which are not installed yet when this runs
_VERSION_RE = re.compile(r"^__version__ = '([^']+)'$", re.MULTILINE)
__version__ = _VERSION_RE.search((Path(__file__).parent / 'jbin' / 'version.py').read_text()).group(1)

setup(
    name='jbin',
    version=__version__,
    description='Compact binary serialization for JSON-like values',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    python_requires='>=3.11',
    entry_points={
        'console_scripts': ['jbin=jbin.cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('jbin_tests', 'jbin_tests.*')),
    install_requires=[
        'colorama',
        'configargparse',
        'pydantic>=2',
        'pyyaml',
        'structlog',
        'typing_extensions>=4.6',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
