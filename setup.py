from setuptools import setup, find_packages

setup(
    name="distrokit",
    version="0.1.0",
    description="distrokit: cross-distribution wrappers for Linux package managers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["rich", "psutil", "requests"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "distrokit=distrokit.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
)
