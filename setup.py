from setuptools import setup, find_packages

setup(
    name="mainargs",
    version="0.1.0",
    description="Named command-line switches and a single-pass token classifier.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="MainArgs Contributors",
    packages=find_packages(include=["mainargs", "mainargs.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.0",
        "regex>=2023.0",
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "toml>=0.10",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["mainargs=mainargs.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
