#!/usr/bin/env python3
"""
eID Adapters Setup
"""

from setuptools import setup, find_packages
import os

# Read version from file
def read_version():
    version_file = os.path.join(os.path.dirname(__file__), 'eid_adapters', '_version.py')
    namespace = {}
    with open(version_file, 'r') as f:
        exec(f.read(), namespace)
    return namespace['__version__']

# Read README for long description
def read_readme():
    readme_file = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_file):
        with open(readme_file, 'r', encoding='utf-8') as f:
            return f.read()
    return "Client-side adapters for remote electronic-identity authentication services"

setup(
    name="eid-adapters",
    version=read_version(),
    description="Client-side adapters for remote electronic-identity authentication services",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.9",
    install_requires=[
        "requests>=2.28.0",
        "pydantic>=2.0.0",
        "cryptography>=42.0.0",
        "urllib3>=1.26.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
        ],
    },
    include_package_data=True,
    keywords=[
        "eid", "smart-id", "authentication", "electronic-identity",
        "certificates", "pki"
    ],
    zip_safe=False,
)
