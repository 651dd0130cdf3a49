#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONDELTA_PATH = HERE / "jsondelta"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(JSONDELTA_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='jsondelta',
      version=VERSION,
      description='Structural diff and JSON patch tools for JSON documents',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.7',
      packages=find_packages(include=['jsondelta', 'jsondelta.*']),
      package_data={
          'jsondelta': ['patch_format.schema.json'],
          'jsondelta.tests': ['files/*.json'],
      },
      install_requires=[
          'colorama',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'jsondelta = jsondelta.__main__:main_dispatch',
              'jsondelta-diff = jsondelta.diffapp:main',
              'jsondelta-patch = jsondelta.patchapp:main',
          ],
      },
      classifiers=[
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
      ],
    )
