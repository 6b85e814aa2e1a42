"""
Setup script for the hexagonal binning package.

To install for development:
    pip install -e .

To install with test dependencies:
    pip install -e .[test]
"""

from setuptools import setup

setup(
    name='hexbin_python',
    version='1.0.0',
    description='Hexagonal binning of 2-D points with hexagon, mesh and center geometry',
    author='Hexbin Team',
    packages=['hexbin_python'],
    py_modules=['hexbin_visualizer'],
    install_requires=[
        'numpy>=1.20.0',
        'pandas>=1.3.0',
        'matplotlib>=3.5.0',
        'psutil>=5.8.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'hexbin-visualizer=hexbin_visualizer:main',
        ],
    },
    python_requires='>=3.7',
    zip_safe=False,
)
