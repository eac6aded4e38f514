from setuptools import setup, find_packages

setup(
    name="pycompdb",
    version="0.1.0",
    description="A compile_commands.json generator for C/C++ projects",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Loris Kriyonas",
    author_email="loris.kriyonas@gmail.com",
    keywords=["c", "cpp", "compile_commands", "clangd"],
    python_requires=">=3.11",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "returns>=0.19",
        "toml>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "pycompdb = pycompdb.main:main",
        ]
    },
)
