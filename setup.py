import setuptools


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


setuptools.setup(
    name = "appgrid",
    version = "0.1",
    packages = [
        "appgrid",
    ],
    include_package_data = True,
    description = "Sorted, filterable application lists laid out on paginated grids",
    license="MIT",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords = "launcher grid pagination applications terminal",
    classifiers = [
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires = [
        "Click",
        "pydantic>=2",
    ],
    extras_require = {
        "test": [
            "pytest",
        ],
    },
    entry_points="""
        [console_scripts]
        appgrid=appgrid.cli:cli
    """,
    python_requires=">=3.10",
)
