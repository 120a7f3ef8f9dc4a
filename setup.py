import pathlib
import re

from setuptools import setup, find_packages

HERE = pathlib.Path(__file__).parent
VERSION = re.search(r"__version__ = '([^']+)'", (HERE / 'pydrf' / '__init__.py').read_text()).group(1)

INSTALL_REQUIRES = [
    'pandas>=1.0',
    'pydantic>=2.6',
]
EXTRAS_REQUIRES = {
    "develop": [
        "pytest>=6.0",
    ]
}
LICENSE = "GNU General Public License v3 or later (GPLv3+)"
DESCRIPTION = 'Parser and canonicalizer for accelerator Device Reference Format (DRF2) strings'
CLASSIFIERS = [
    "Programming Language :: Python :: 3.9",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
    "Intended Audience :: Science/Research",
]

setup(
   name='pydrf',
   version=VERSION,
   author='Nikita Kuklev',
   author_email='',
   description=DESCRIPTION,
   license=LICENSE,
   packages=find_packages(exclude=['tests', 'tests.*']),
   platforms="any",
   install_requires=INSTALL_REQUIRES,
   python_requires=">=3.9",
   extras_require=EXTRAS_REQUIRES,
   classifiers=CLASSIFIERS
)
