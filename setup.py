"""tuiharness lives at <https://github.com/tuiharness/tuiharness>.

tuiharness
----------

Script end-to-end scenarios against list-oriented terminal UIs: intents in,
key presses out, rendered state polled until it converges.

"""

import pathlib

from setuptools import find_packages, setup

about = {}
with open("src/tuiharness/__about__.py") as fp:
    exec(fp.read(), about)

readme = pathlib.Path("README.md").read_text(encoding="utf-8")

tests_reqs = [
    "pytest>=7.0",
]


setup(
    name=about["__title__"],
    version=about["__version__"],
    url=about["__github__"],
    download_url=about["__pypi__"],
    project_urls={
        "Documentation": about["__docs__"],
        "Code": about["__github__"],
        "Issue tracker": about["__tracker__"],
    },
    license=about["__license__"],
    author=about["__author__"],
    author_email=about["__email__"],
    description=about["__description__"],
    long_description=readme,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "libtmux>=0.30",
    ],
    extras_require={
        "test": tests_reqs,
    },
    entry_points={
        "pytest11": [
            "tuiharness = tuiharness.pytest_plugin",
        ],
    },
    zip_safe=False,
    keywords=about["__title__"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX",
        "Operating System :: MacOS :: MacOS X",
        "Framework :: Pytest",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Testing",
        "Topic :: Terminals",
    ],
)
