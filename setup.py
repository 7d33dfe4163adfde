""" ecelgamal build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecelgamal

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecelgamal.name,
    version=ecelgamal.__version__,
    license=ecelgamal.__license__,
    author=ecelgamal.__author__,
    author_email=ecelgamal.__author_email__,
    description="ElGamal encryption over elliptic curves, for didactical purposes",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ecelgamal": ["data/*.json"]},
    include_package_data=True,
    install_requires=["dataclasses_json"],
    extras_require={"test": ["pytest"]},
    keywords="elgamal elliptic-curves cryptography modular-arithmetic education",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
