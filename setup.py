#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import find_packages, setup

# There are problems running setup.py on Windows if the encoding is not set
with open('README.md', encoding='utf8') as readme_file:
    readme = readme_file.read()


setup(
    name='rudder-analytics',
    version='1.0.0',
    description="Configuration resolution for the analytics event-tracking client.",
    long_description=readme,
    long_description_content_type="text/markdown",
    author="RudderStack",
    author_email='sdk@rudderstack.com',
    url='https://github.com/rudderlabs/rudder-analytics',
    packages=find_packages(include=['analytics', 'analytics.*']),
    include_package_data=True,
    install_requires=[
        'httpx',
        'tenacity',
        'pydantic>=2',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires=">=3.9",
    license="MIT license",
    zip_safe=False,
    keywords='analytics',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ]
)
