# setup.py
from setuptools import setup, find_packages

setup(
    name="treeforge",
    version="1.0.0",
    description="Create directories and empty files from a tree diagram",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "treeforge": ["interface/locales/*.json"],
    },
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'treeforge=treeforge.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
