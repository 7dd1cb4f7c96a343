"""Setup script for polyhash."""

from pathlib import Path

from setuptools import find_packages, setup


def read_long_description():
    """Use DESIGN.md as the long description when present."""
    design = Path(__file__).parent / "DESIGN.md"
    if design.exists():
        return design.read_text(encoding="utf-8")
    return ""


setup(
    name="polyhash",
    version="0.1.0",
    description="Generate and verify digests for many hash algorithms through one interface",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(include=["polyhash", "polyhash.*"]),
    install_requires=[
        "blake3>=0.3",
        "click>=8.1",
        "dependency-injector>=4.41",
        "fnvhash>=0.1.0",
        "ImageHash>=4.3",
        "mmh3>=4.1",
        "Pillow>=10.0",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "tomli>=2.0; python_version < '3.11'",
        "whirlpool>=1.0",
        "xxhash>=3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "polyhash=polyhash.__main__:main",
        ],
    },
)
