# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirtwins",
    version="0.1.0",
    description="Rebuild a directory tree from a path list and find near-duplicate directories",
    packages=find_namespace_packages(where="src", include=["dirtwins", "dirtwins.*"]),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "rapidfuzz>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'dirtwins=dirtwins.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
