from setuptools import setup

setup(
    name="geojsonspec",
    version="0.1.0",
    description="A typed GeoJSON codec and validator built on msgspec",
    license="BSD",
    packages=["geojsonspec"],
    package_data={"geojsonspec": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.19.0"],
    extras_require={"test": ["pytest"]},
)
