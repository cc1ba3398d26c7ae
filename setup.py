from setuptools import setup, find_packages

# To use a consistent encoding
from codecs import open
from os import path

# The directory containing this file
HERE = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(HERE, 'README.rst'), encoding='utf-8') as f:
    readme_content = f.read()

# This call to setup() does all the work
setup(
    name='sdotool',
    packages=find_packages(exclude=['test', 'test.*']),
    version='0.3.0',
    description='Validate CANopen SDO requests against an EDS object dictionary',
    long_description=readme_content,
    long_description_content_type='text/x-rst',
    license='MIT',
    python_requires='>=3.8',
    install_requires=['python-can'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['sdotool = sdotool.cli:main'],
    },
)
