from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="bintext",
    version="1.0.0",
    packages=find_packages(include=["bintext", "bintext.*"]),
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["bintext=bintext.main:main"],
    },
    python_requires=">=3.10",
    description="Hex, Base32, Base45, Base64 and URL-safe Base64 codecs with tagged decode results",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
