#!/usr/bin/env python

from setuptools import setup, find_packages

setup(
    name='backstage-catalog-data-sources',
    version='0.0.1',
    description='Backstage Software Catalog entities as read-only Terraform data sources',
    author='NBCUniversal',
    license='Apache License 2.0',
    package_dir={'': 'src/catalog'},
    packages=find_packages(where='src/catalog', exclude=['tests.*', 'tests']),
    keywords="backstage catalog terraform data-source",
    python_requires='>=3.13',
    include_package_data=True,
    install_requires=[
        'aws_lambda_powertools',
        'dataclasses-json',
        'jsonschema',
        'requests',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-mock',
            'requests-mock',
        ],
    },
    classifiers=[
        'Environment :: Console',
        'Environment :: Other Environment',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.13',
    ]
)
