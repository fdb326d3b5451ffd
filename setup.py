from setuptools import setup, find_packages

setup(
    name="choice-string",
    version="0.1.0",
    description="Parser for choice strings: all, none, or lists of numbers and ranges",
    author="Valerio Galano",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "choice-string=choice_string.cli:main",
        ],
    },
)
