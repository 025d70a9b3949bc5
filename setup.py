from setuptools import setup, find_packages


setup(
    name="mtp",
    version="0.0.1",
    packages=find_packages(exclude=["tests"]),
    package_data={
        '': ['*.json']
    },
    install_requires=[
        "cryptography>=2.7",
    ],
    extras_require={
        "debug": ["pytest>=5.3.2"]
    }
)
