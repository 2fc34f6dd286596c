#!/usr/bin/env python3

import asem
from setuptools import setup, find_packages


with open("requirements.txt") as f:
  requires = f.read().splitlines()


setup(name="asem",
      version=asem.__version__,
      description="asynchronous semaphore: run a callback once a known "
                  "number of operations have completed",
      packages=find_packages(),
      include_package_data=True,
      zip_safe=False,
      test_suite="asem",
      install_requires=requires,
      entry_points="""\
      [console_scripts]
      asem = asem.__main__:main
      """
      )
