"""Setup script for haven."""
import re

from setuptools import setup, find_packages  # type: ignore

with open('haven/__init__.py') as f:
    version = re.search(r"^version = '([^']+)'", f.read(), re.M).group(1)

setup(
    name='haven',
    version=version,
    description='Curried functions with run-time type checking',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='currying type-checking functional',
    packages=find_packages(include=['haven', 'haven.*']),  # type: ignore
    python_requires='>=3.12',
    install_requires=[
        'parsy>=1.3.0',
        'typing-extensions>=4',
    ],
    extras_require={
        'test': ['coverage>=6.4.4', 'hypothesis>=6', 'pytest>=7'],
        'dev': ['mypy>=1.1.1', 'pre-commit>=2.6.0'],
    },
)
