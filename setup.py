from setuptools import setup, find_packages

setup(
    name="cvm-sketch",
    version="0.1.0",
    description="Bounded-memory distinct counting with the CVM algorithm",
    author="adamfilli",
    packages=find_packages(include=["cvmsketch", "cvmsketch.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.13",
)
