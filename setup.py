"""
Setup configuration for the reactor control room simulator.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="reactor-sim",
    version="1.0.0",
    author="Reactor Sim Team",
    description="Real-time nuclear reactor simulation served over HTTP",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.19.0",
        "fastapi>=0.100",
        "pydantic>=2.0",
        "uvicorn>=0.22",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.10",
            "httpx>=0.24",
        ],
    },
    entry_points={
        "console_scripts": [
            "reactor-sim=reactor_sim.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
