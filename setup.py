from setuptools import setup, find_packages

setup(
    name="adcolors",
    version="0.1.0",
    description="Chainable ANSI terminal styling, color math and layout helpers",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    python_requires=">=3.11",
)
