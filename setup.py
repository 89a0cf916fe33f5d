from setuptools import find_packages, setup

setup(
    name="prodrepeat",
    version="0.1.0",
    packages=find_packages(),
    python_requires=">=3.12",
    extras_require={"test": ["pytest"]}
)
