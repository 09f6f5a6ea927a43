#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

requirements = [
    'numpy',
    'matplotlib',
    'seaborn',
]

test_requirements = [
    'pytest',
    'scipy',
    'flake8',
]

setup(
    author="Nicolas Franco-Gomez",
    author_email='nicolasfrancogomez@gmail.com',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10'
    ],
    description="Streaming filters for sample-by-sample sensor data.",
    install_requires=requirements,
    extras_require={'test': test_requirements},
    license="MIT license",
    long_description=readme,
    include_package_data=True,
    keywords='streamfilters',
    name='streamfilters',
    packages=find_packages(include=['streamfilters', 'streamfilters.*']),
    test_suite='tests',
    tests_require=test_requirements,
    version='0.1.0',
    zip_safe=False,
    python_requires='>=3.10'
)
