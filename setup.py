# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fuzzyfinder",
    version="0.1.0",
    description="Fuzzy file finder: locate files by abbreviated path with scored, highlighted matches",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fuzzyfinder*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'fuzzyfinder=fuzzyfinder.interface.cli.app:main',
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
