from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="gridflow",
    version="0.1.0",
    description="Path search and max-flow algorithms on weighted grid lattices.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=["jsonschema", "networkx", "PyYAML"],
    package_data={"gridflow.schemas": ["*.json"]},
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["gridflow=gridflow.cli:main"]},
)
