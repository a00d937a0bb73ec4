from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="secgraph",
    version="0.1.0",
    description="Strong edge connectivity of directed graphs via binary max-flow programs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["numpy", "networkx", "PuLP"],
    extras_require={"dev": ["pytest"]},
    tests_require=["pytest", "networkx"],
)
