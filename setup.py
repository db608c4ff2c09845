from setuptools import setup, find_packages

# Use find_packages to automatically discover all packages
packages = find_packages(include=["rtnorm", "rtnorm.*"])

setup(
    name="rtnorm",
    version="0.1.0",
    description="Fast pseudorandom numbers from truncated Gaussian distributions (Chopin's algorithm)",
    packages=packages,
    package_data={
        "rtnorm": ["tables/data/*.txt", "cli/*.yaml"],
    },
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pandas",
        "scipy",
        "tqdm",
        "pyyaml",
        "typer",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "rtnorm-generate=rtnorm.cli.generate:app",
        ],
    },
)
