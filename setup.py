""" ecarith build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecarith

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecarith.name,
    version=ecarith.__version__,
    license=ecarith.__license__,
    author=ecarith.__author__,
    author_email=ecarith.__author_email__,
    description="Elliptic curve arithmetic over prime fields",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["ecarith=ecarith.__main__:main"]},
    keywords="cryptography elliptic-curves finite-fields education",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
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
