from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="flu",
    version="0.1.0",
    description="Chainable ANSI styling for terminal text",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="ISC",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    package_data={"flu": ["py.typed"]},
    python_requires=">=3.8",
    install_requires=[
        "typing_extensions>=4.0.0",
        "tyro>=0.8.0",
    ],
    extras_require={
        "testing": [
            "pytest",
            "pytest-cov",
        ],
        "type-checking": [
            "mypy",
        ],
    },
    entry_points={
        "console_scripts": ["flu=flu._cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Operating System :: OS Independent",
    ],
)
