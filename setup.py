# setup.py
from setuptools import setup, find_packages

setup(
    name="jsoncolumn",
    version="0.1.0",
    description="SQLAlchemy column type for storing JSON objects as text",
    packages=find_packages(include=["jsoncolumn", "jsoncolumn.*"]),
    include_package_data=True,
    package_data={
        "jsoncolumn": ["config/*.yaml"],
    },
    python_requires=">=3.9",
    install_requires=[
        "SQLAlchemy>=2.0",
        "omegaconf",
        "pydantic>=2",
    ],
    extras_require={
        "postgres": ["psycopg2-binary"],
        "test": ["pytest"],
    },
)
