"""WasteProof setup - Recycling claims and waste volumes, with receipts."""
from setuptools import setup, find_packages

setup(
    name="wasteproof",
    version="1.0.0",
    description="WasteProof: recycling claim verification and waste volume ledgers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "blake3>=0.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wasteproof=wasteproof_cli.main:cli",
        ],
    },
)
