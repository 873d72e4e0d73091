from setuptools import setup, find_packages

setup (
    name = "pitchnotation",
    version = "0.0.1",
    author = "F. X. P.",
    author_email = "litran39@hotmail.com",
    description = "Converts pitch and interval names to and from array notation.",
    long_description = open ( 'README.md' ).read ( ),
    long_description_content_type = "text/markdown",
    package_dir = { "": "src" },
    packages = find_packages ( "src" ),
    install_requires = [
        "numpy",
        "bidict",
        "pyrsistent",
    ],
    classifiers = [
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
    ],
    python_requires = ">=3.12",
)
