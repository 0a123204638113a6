import os

from setuptools import setup

version = {}
with open(os.path.join("geocodec", "_version.py")) as f:
    exec(f.read(), version)

setup(
    name="geocodec",
    version=version["__version__"],
    license="BSD",
    description="Decode and encode GeoJSON geometries with msgspec",
    packages=["geocodec"],
    package_data={"geocodec": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec"],
    extras_require={"test": ["pytest"]},
)
