#!/usr/bin/env python
from setuptools import setup
import os


def get_version():
    curdir = os.path.dirname(__file__)
    filename = os.path.join(curdir, 'src', 'curvelut', 'version.py')
    with open(filename, 'rb') as fp:
        return fp.read().decode('utf8').split('=')[1].strip(" \n'")


def readme():
    with open('README.rst') as f:
        return f.read()


setup(
    name='curvelut',
    version=get_version(),
    description='Build per-channel curve lookup tables from key points, '
                'presets and Photoshop curve files',
    long_description=readme(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Multimedia :: Video',
    ],
    keywords='curves lut spline photoshop acv',
    license='LGPL-3.0-or-later',
    package_dir={'': 'src'},
    packages=['curvelut'],
    python_requires='>=3.10',
    install_requires=[
        'numpy',
        'pillow',
        'psd-tools>=1.9',
    ],
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True,
    entry_points={
        'console_scripts': ['curvelut=curvelut.__main__:main']
    },
    )
