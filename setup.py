import setuptools

setuptools.setup(
    name="rooted-fs",
    version="0.1",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "rfs = rooted_fs.cli:cli_entrypoint",
        ],
    },
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "pretty": ["rich"],
        "test": ["pytest>=7.0"],
    },
    author="Andrew Stanton",
    author_email="refefer@gmail.com",
    description="File management confined to a root directory, with lexical path normalization.",
    license="MIT",
)
