from setuptools import setup, find_packages

setup(
    name="bmsearch",
    version="0.1.0",
    description="Boyer-Moore exact substring search with the strong good suffix rule",
    packages=find_packages(include=["bmsearch", "bmsearch.*", "benchmarks"]),
    package_data={"bmsearch.config": ["bmsearch.conf"]},
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "benchmarks": [
            "pandas>=1.3.0",
            "matplotlib>=3.4.0",
            "psutil>=5.8.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.50.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "bmsearch=bmsearch.cli:main",
        ],
    },
)
