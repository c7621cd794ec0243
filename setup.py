from setuptools import setup, find_packages

setup(
    name="godo",
    version="0.1.0",
    description="A minimal build orchestrator for Java projects",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords=["java", "build"],
    python_requires=">=3.11",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "returns",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "godo = godo.main:main",
        ]
    },
)
