from setuptools import setup, find_packages


setup(
    name = "rbset",
    version = "0.3.0",
    description = "Red-black tree ordered key container",
    packages = find_packages(include=["rbset", "rbset.*"]),
    python_requires = ">=3.8",
    extras_require = {
        "test": [
            "pytest",
            "hypothesis",
            ],
        },
    entry_points = {
        "console_scripts": [
            "rbset = rbset.main:main",
            ],
        },
)
