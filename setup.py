import re
from codecs import open
from os import path

from setuptools import find_packages, setup

name = "paramcheck"
here = path.abspath(path.dirname(__file__))

# get package version
with open(path.join(here, name, "__init__.py"), encoding="utf-8") as f:
    result = re.search(r'__version__ = ["\']([^"\']+)', f.read())

    if not result:
        raise ValueError("Can't find the version in paramcheck/__init__.py")

    version = result.group(1)

# get the dependencies and installs
with open("requirements.txt", "r", encoding="utf-8") as f:
    requires = [x.strip() for x in f if x.strip()]

with open("test_requirements.txt", "r", encoding="utf-8") as f:
    test_requires = [x.strip() for x in f if x.strip() and not x.startswith("-r")]

setup(
    name=name,
    version=version,
    description="Declarative, decorator-based validation of method parameters",
    license="Apache Software License (Apache 2.0)",
    python_requires=">=3.9",
    packages=find_packages(exclude=["docs*", "tests*"]),
    include_package_data=True,
    package_data={name: ["py.typed", "default_logging.yml"]},
    install_requires=requires,
    extras_require={"test": test_requires},
    entry_points={"console_scripts": ["paramcheck = paramcheck.cli:main"]},
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
