#! /usr/bin/env python
# -*- coding:utf-8 -*-

from setuptools import setup, find_packages

setup(
    name='svgtween',
    version='0.1',
    description='Smooth interpolation between SVG paths with different numbers of points',
    license='MIT',
    packages=find_packages(),
    classifiers=['Development Status :: 4 - Beta',
                 'Programming Language :: Python',
                 'Programming Language :: Python :: 3'],
    entry_points={
        'console_scripts': ['svgtween=svgtween.cli:main'],
    },
    install_requires=['svgpathtools'],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.6',
)
