from setuptools import setup, find_packages

setup(
    name="construction-marketplace-api",
    version="1.0.0",
    packages=find_packages(include=["backend", "backend.*"]),
    install_requires=[
        # Runtime stack shared by the API service and the shared package
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "email-validator>=2.0.0",
        "sqlalchemy>=2.0.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0.0",
        "prometheus-client>=0.16.0",
        "PyJWT>=2.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
        ],
    },
    author="Your Name",
    author_email="your.email@example.com",
    description="Construction Marketplace API - equipment rental and building materials catalog",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords="marketplace, equipment, rental, materials, fastapi",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "marketplace-api=backend.services.api.src.main:main",
        ],
    },
)
