# setup.py
"""Setup script for mediadiff."""

import os

from setuptools import setup, find_packages

setup(
    name="mediadiff",
    version="1.0.0",
    description="List and delete uploaded media that has no entry in the attachment database",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Media Tool Team",
    packages=find_packages(include=["mediadiff", "mediadiff.*"]),
    python_requires=">=3.9",
    install_requires=[
        "tqdm>=4.50.0",
        "PyYAML>=5.4",
    ],
    extras_require={
        "test": [
            "pytest>=6.0.0",
            "pytest-cov>=2.10.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mediadiff=mediadiff.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: System :: Filesystems",
        "Topic :: System :: Archiving",
    ],
)
