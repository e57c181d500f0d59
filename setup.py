#!/usr/bin/env python3
"""
Setup-Script für die Bibliotheksverwaltung mit Kategorie-Empfehlungen
"""

from setuptools import setup, find_packages
import os

here = os.path.dirname(os.path.abspath(__file__))

# Version aus version.py lesen
version_file = os.path.join(here, 'version.py')
version_data = {}
with open(version_file, 'r', encoding='utf-8') as f:
    exec(f.read(), version_data)

# README für PyPI
with open(os.path.join(here, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

# Requirements
with open(os.path.join(here, 'requirements.txt'), 'r', encoding='utf-8') as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

setup(
    name='library-category-recommender',
    version=version_data['__version__'],
    author=version_data['__author__'],
    description=version_data['__description__'],
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['main', 'version'],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'Topic :: Utilities',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.9',
    install_requires=requirements,
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
            'black>=23.0.0',
            'flake8>=6.0.0',
            'mypy>=1.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'library-recommender=main:main',
        ],
    },
    include_package_data=True,
    keywords='library catalog lending categories recommendations books',
    license=version_data['__license__'],
    zip_safe=False,
)
