"""
A setuptools based setup module.

See:
https://packaging.python.org/guides/distributing-packages-using-setuptools/
"""

import setuptools

PACKAGE_DATA = {
    "shred": ["data/*.yml", "data/schemas/*.json"],
}

INSTALL_REQUIRES = [
    "attrs>=20.3.0",
    "jsonschema",
    "numpy",
    "particle",
    "PyYAML",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest",
    ],
}


def long_description():
    """Parse long description from readme."""
    with open("README.md", "r") as readme_file:
        return readme_file.read()


setuptools.setup(
    name="shred",
    version="0.1.0",
    description="Element and nuclide reference data and observable atom models",
    long_description=long_description(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    python_requires=">=3.6",
    tests_require=EXTRAS_REQUIRE["test"],
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    package_data=PACKAGE_DATA,
    include_package_data=True,
)
