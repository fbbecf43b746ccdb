#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='sepa-transfer',
    version=__import__('sepa').__version__,
    description='Signed ApplicationRequest builder for the Finnish bank file-exchange web service.',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Security :: Cryptography',
        'Topic :: Office/Business :: Financial',
        'Topic :: Text Processing :: Markup :: XML',
    ],
    keywords='sepa xmldsig xml signature bank web services application request',
    packages=find_packages(exclude=['examples', 'tests']),
    include_package_data=True,
    package_data={
        'sepa': [
            'xml_templates/application_request/*.xml',
            'xml_schemas/*.xsd',
        ],
    },
    platforms=["all"],
    python_requires='>=3.9',
    install_requires=['cryptography', 'asn1crypto', 'lxml', 'attrs'],
    extras_require={'test': ['pytest']},
    test_suite="tests",
)
