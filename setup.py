"""Setup configuration for the filterset package."""

from setuptools import setup, find_namespace_packages

setup(
    name="filterset",
    version="1.0.0",
    description="Declarative search filters that validate user input and build SQL conditions",
    author="Alex",
    author_email="",
    packages=find_namespace_packages(include=["config*", "src*", "api*"]),
    python_requires=">=3.11",
    install_requires=[
        "duckdb>=1.0.0",
        "pandas>=2.1.0",
        "python-dotenv>=1.0.0",
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "httpx>=0.26.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
)
