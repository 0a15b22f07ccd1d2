from setuptools import setup, find_packages

setup(
    name="transitloom",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pyswisseph>=2.10.0",
    ],
    extras_require={
        "tools": [
            "click>=8.0.0",
            "tqdm>=4.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
)
