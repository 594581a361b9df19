from setuptools import setup, find_packages

setup(
    name="profile-hough",
    version="1.0.0",
    description="Circle Hough center detection for laser profile scans",
    author="NovaVista",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "numpy>=1.24.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
)
