#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
#
# Signed data-item uploads (and character metadata) in python
#

import re

# To use this command to install and yet be able to edit the code (here). Great for dev:
#
#   pip install --editable .
#
# with cli dependencies
#
#   pip install --editable '.[cli]'
#
# with test dependencies
#
#   pip install --editable '.[test]'
#
#
from setuptools import setup

# read version without importing the package (deps may not be installed yet)
with open("aritem/__init__.py", "r") as fh:
    __version__ = re.search(r"^__version__ = '([^']+)'", fh.read(), re.M).group(1)

# these minimum versions are tested, some earlier values would probably work too.
requirements = [
    'pynacl>=1.5.0',
    'httpx>=0.24.0',
    'pillow>=9.0.0',
]

cli_requirements = [
    'click>=8.0.3',
    'pyqrcode>=1.2.1',
    'pypng>=0.0.21',
]

test_requirements = [
    'pytest',
    'pytest-asyncio>=0.21.0',
    'base58>=2.1.0',
] + cli_requirements

# only for developers playing with crypto libraries - cross library comparisons
test_plus_requirements = [
    'cryptography>=41.0.0',
] + test_requirements

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name='aritem',
    version=__version__,
    packages=[ 'aritem' ],
    python_requires='>=3.8',
    install_requires=requirements,
    extras_require={
        'cli': cli_requirements,
        'test': test_requirements,
        'test_plus': test_plus_requirements,
    },
    description="Build, sign and upload data items; two-step character metadata uploads",
    long_description=long_description,
    long_description_content_type="text/markdown",
    entry_points='''
        [console_scripts]
        aritem=aritem.cli:main
    ''',
    classifiers=[
        'Operating System :: POSIX :: Linux',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: MacOS :: MacOS X',
    ],
)
