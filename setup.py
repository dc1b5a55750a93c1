"""
Setup script for the resume-builder project.

Allows development installation with `pip install -e .`
Install test dependencies with `pip install -e .[test]`
"""

from setuptools import setup, find_packages

setup(
    name="resume-builder",
    version="0.1.0",
    packages=find_packages(include=["resume_builder", "resume_builder.*", "api_service", "api_service.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.27",
        ],
    },
)
