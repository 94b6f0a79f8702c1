#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

readme = """Emoji tools find emoji in text and look emoji up by alias, tolerating
typos in the alias"""

setup(name='emojitools',
      version='0.0.1',
      description='Emoji matching tools',
      license="Apache",
      long_description=readme,
      author='Emoji Tools Authors',
      packages=find_packages(exclude=['tests']),
      include_package_data=True,
      python_requires='>=3.7',
      install_requires=[
          'rapidfuzz>=2.0',
      ],
      package_data={
          'emojitools': [
              'data/*.json',
          ]
      },
      entry_points={
          'console_scripts': [
              'emojilookup = emojitools.emoji_lookup:main',
          ]
      })
