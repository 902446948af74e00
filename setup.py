"""Setup script for the rami-utils package."""

from setuptools import find_packages, setup

setup(
    name="rami-utils",
    version="0.1.0",
    description="Pose math and array interop helpers for engine-style transforms",
    author="Rami Pastrami",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "numpy>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
)
