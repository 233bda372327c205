from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="afterpay-python",
    version="0.1.0",
    author="Nayeem Islam",
    author_email="islam.nayeem@outlook.com",
    description="Python SDK core for the Afterpay API - HTTP message parsing and log-safe redaction",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/NoManNayeem/afterpay-python",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Office/Business :: Financial :: Point-Of-Sale",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.24.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "dotenv": ["python-dotenv>=1.0.0"],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },
    project_urls={
        "Bug Reports": "https://github.com/NoManNayeem/afterpay-python/issues",
        "Source": "https://github.com/NoManNayeem/afterpay-python",
    },
    keywords="afterpay payment gateway api sdk python http logging redaction",
)
