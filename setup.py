# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="filetree-markup",
    version="0.1.0",
    description="Render nested HTML lists as annotated, interactive file trees",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["filetree_markup*"]),
    package_data={"filetree_markup": ["interface/locales/*.json"]},
    python_requires=">=3.9",
    install_requires=[
        "beautifulsoup4>=4.12",
        "html5lib>=1.1",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'filetree-markup=filetree_markup.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
