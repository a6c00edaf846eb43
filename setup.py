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

# bencodex itself can't be imported here, its dependencies may not be installed yet
_version_file = Path(__file__).parent / 'bencodex' / 'version.py'
__version__ = re.search(r"^BASE_VERSION = '([^']+)'", _version_file.read_text(), re.MULTILINE).group(1)

install_requires = [
    'pydantic>=2.0,<3',
    'PyYAML>=6.0',
    'sortedcontainers>=2.4',
    'structlog>=22.3',
    'typing_extensions>=4.10',
]

setup(
    name='bencodex',
    version=__version__,
    description='Bencode codec with a typed value tree',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.10',
    packages=find_packages(exclude=('tests', 'tests.*', 'tools', 'tools.*')),
    package_data={'bencodex.conf': ['*.yml']},
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7.0'],
        'fuzz': ['atheris>=2.3'],
    },
)
