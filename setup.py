from setuptools import setup, find_packages

setup(
    name="np-reductions",
    version="0.1",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    install_requires=[
        "networkx>=2.8",
        "numpy>=1.22",
        "matplotlib>=3.5",
        "pandas>=1.4",
        "pulp>=2.7",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "npreduce=npreduce.cli:main",
        ],
    },
)
