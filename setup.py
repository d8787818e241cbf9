from setuptools import setup, find_packages

setup(
    name="dicekeep",
    version="0.1.0",
    package_dir={"": "src"},  # Tell setuptools to look in src/
    packages=find_packages(where="src"),
    install_requires=["numpy>=1.20", "rich"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
)
