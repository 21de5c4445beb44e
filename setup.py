"""Setup script for lambdakit."""
import pathlib
import re

from setuptools import setup, find_packages  # type: ignore

# Read the version without importing the package, whose dependencies might
# not be installed yet.
version = re.search(
    r"^version = '([^']+)'$",
    pathlib.Path('lambdakit/__init__.py').read_text(),
    re.MULTILINE,
).group(1)  # type: ignore

setup(
    name='lambdakit',
    version=version,
    description='Currying with auto-unrolled application, and documentation metadata helpers',  # noqa
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
    ],
    keywords='curry functional partial-application',
    packages=find_packages(include=['lambdakit', 'lambdakit.*']),  # type: ignore
    python_requires='>=3.8',
    install_requires=[
        'typing-extensions>=4',
    ],
    extras_require={
        'test': [
            'coverage>=6.4.4',
            'hypothesis>=6',
            'pytest',
        ],
        'dev': ['mypy>=1.1.1', 'pre-commit>=2.6.0'],
    },
)
