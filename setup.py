"""
Build script for xstrings.
"""

# std
import os

# third-party
from setuptools import Command, find_packages, setup


# ---------------------------------------------------------------------------- #

class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        os.system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info')


# Main
# ---------------------------------------------------------------------------- #

setup(
    name='xstrings',
    version='0.1.0',
    description='String comparison, case conversion, printf-style formatting '
                'and splitting for str and bytes.',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={'xstrings': ['config.yaml']},
    install_requires=[
        'loguru',
        'more-itertools',
        'platformdirs',
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    cmdclass={'clean': CleanCommand}
)
