from setuptools import setup, find_packages

setup(
    name="rmlIngest",
    version="0.1.0",
    description="Ingestion front-end for RML mapping documents",
    packages=find_packages(include=["rmlIngest", "rmlIngest.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "rdflib>=7.0",
        "PyYAML>=6.0",
        "tabulate>=0.8.9",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["rmlIngest=rmlIngest.cli:main"],
    },
    license="MIT",
)
