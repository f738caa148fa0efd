from setuptools import setup, find_packages

setup(
    name="griddy",
    version="0.1.0",
    packages=find_packages(include=["griddy", "griddy.*"]),
    package_data={"griddy": ["configs/*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
