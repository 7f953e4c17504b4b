from setuptools import find_packages, setup

setup(
    name="jsonvalue",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=["PyYAML>=6.0"],
    entry_points={"console_scripts": ["jsonvalue=jsonvalue.cli:main"]},
)
