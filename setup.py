#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

requirements = []

test_requirements = [
    'pytest',
    'pytest-asyncio',
]

setup(
    name='layoutdoc',
    version='0.1.0',
    description="Composable text layout with column-aligned rendering",
    long_description=readme,
    author="Tommi Kaikkonen",
    author_email='kaikkonentommi@gmail.com',
    packages=find_packages(include=['layoutdoc']),
    include_package_data=True,
    install_requires=requirements,
    license="MIT license",
    zip_safe=False,
    keywords='layoutdoc',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3.6',
    ],
    python_requires='>=3.6',
    test_suite='tests',
    tests_require=test_requirements,
    extras_require={
        'test': test_requirements,
    },
)
