# setup.py
from setuptools import setup, find_packages

setup(
    name="fixtree",
    version="0.1.0",
    description="Materialize in-memory file tree descriptions on disk for test fixtures and scaffolding",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'fixtree=fixtree.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
