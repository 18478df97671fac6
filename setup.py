#!/usr/bin/python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import os

ROOT = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(ROOT, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='pyiapwsvisc',
    include_package_data=True,
    version='1.0.0',  # Ideally should be same as your GitHub release tag version
    packages=find_packages(),
    description='pyiapwsvisc - IAPWS Water & Steam Viscosity with Analytic Derivatives',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Mark W. Burgoyne',
    author_email='mark.w.burgoyne@gmail.com',
    keywords=['iapws', 'water', 'steam', 'viscosity'],
    classifiers=[],
    install_requires=[
        'numpy',
        'pandas',
        'tabulate',
        'openpyxl',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
