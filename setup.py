import os
from setuptools import setup


src_version = os.path.join(os.path.dirname(__file__), "aocutils", "version.py")
with open(src_version) as f:
    version = f.read().strip().split()[-1][1:-1]


setup(
    name="advent-of-code-utils",
    version=version,
    description="Read your puzzle input and submit answers from any solution module",
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    packages=["aocutils"],
    entry_points={
        "console_scripts": [
            "aocu=aocutils.cli:main",
        ],
    },
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
    python_requires=">=3.9",
    install_requires=[
        "beautifulsoup4",
        "urllib3",
        "javaproperties",
        'tzdata; platform_system == "Windows"',
    ],
    extras_require={
        "test": [
            "freezegun",
            "pook",
            "pytest",
            "pytest-freezer",
            "pytest-mock",
            "pytest-raisin",
        ],
    },
)
