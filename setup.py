from setuptools import setup, find_packages

setup(
    name="mesh-structures",
    version="0.1.0",
    description="Convert triangle meshes into soup, indexed, half-edge and winged-edge representations",
    author="",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "trimesh",
        "networkx",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
