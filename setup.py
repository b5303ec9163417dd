from setuptools import setup, find_packages
from pathlib import Path

here = Path(__file__).parent
long_description = (here / "README.md").read_text(encoding="utf-8")

setup(
    name="deeplink-inspector",
    version="1.0.1",
    description="List exported Android components and the deeplinks their intent filters accept",
    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=find_packages(exclude=["tests*", "examples*", "docs*"]),
    include_package_data=True,
    python_requires=">=3.9",

    install_requires=[
        "lxml>=5.2.0",
        "pydantic>=2.6.0",
        "colorama>=0.4.6",
    ],

    extras_require={
        "test": [
            "pytest>=7.0",
        ]
    },

    entry_points={
        "console_scripts": [
            "deeplink-inspector=deeplink_inspector.main:main"
        ]
    },

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "Topic :: Security",
    ],

    keywords="android apk manifest deeplink exported-components attack-surface apktool",
    license="MIT",
)
