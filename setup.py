from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="graphsolve",
    version="0.3.0",
    author="graphsolve developers",
    description="Maximum flow, minimum spanning tree and shortest path solvers.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["networkx", "PyYAML"],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest", "networkx"],
    entry_points={"console_scripts": ["graphsolve=graphsolve.cli:main"]},
)
