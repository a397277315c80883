"""Setup script for blockgrid package."""

from setuptools import setup, find_packages

setup(
    name='blockgrid',
    version='1.0',
    packages=find_packages(include=['blockgrid', 'blockgrid.*']),
    package_data={'blockgrid.config': ['defaults.yaml']},
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.20.0',
        'matplotlib>=3.3.0',
        'PyYAML>=5.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
