import setuptools
from setuptools import setup, find_packages

setup(
    name="cliffordtools",
    version="0.1",
    description="Symplectic Pauli algebra and tableau sweeps for sampling random Clifford circuits",
    author="Thomas Steckmann",
    author_email="tmsteckm@gmail.com",
    packages=["cliffordtools"],
    package_dir={"cliffordtools": "src"},
    install_requires=[
        "numpy",
        "numba",
        "galois",
        "joblib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["cliffordtools=cliffordtools.cli:main"],
    },
    python_requires=">=3.8",
)
