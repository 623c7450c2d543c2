#!/usr/bin/env python
'''
Created on 2021/9/27

:author: hubo
'''
from setuptools import setup, find_packages

VERSION = '1.0.0'

setup(name='minpq',
      version=VERSION,
      description='Indexed min priority queue: a binary heap with an element-to-position index, supporting priority changes by element.',
      author='Hu Bo',
      author_email='hubo1016@126.com',
      license="http://www.apache.org/licenses/LICENSE-2.0",
      keywords=['heap', 'priority queue', 'indexed heap'],
      test_suite = 'tests',
      install_requires = [],
      packages=find_packages(exclude=("tests","tests.*")))
