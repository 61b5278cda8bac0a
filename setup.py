from setuptools import setup, find_packages

setup(
    name="spdxGraph",
    version="0.3.0",
    description="Versioned SPDX license mapping to and from RDF graphs",
    author="Your Name",
    author_email="you@example.com",
    packages=find_packages(include=["spdxGraph", "spdxGraph.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rdflib>=6.3",
        "beautifulsoup4>=4.11",
        "lxml>=4.9",
        "PyYAML>=6.0",
        "click>=8.0",
        "tabulate>=0.8.9",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["spdxGraph=spdxGraph.cli.licenses:main"],
    },
    license="MIT",
)
