# The author disclaims copyright to this source code. Please see the
# accompanying UNLICENSE file.

import subprocess
from typing import List
from typing import Tuple

import setuptools


class FormatCommand(setuptools.Command):

    description = "Run isort, autoflake and black on python source files"
    user_options: List[Tuple] = []

    def initialize_options(self) -> None:
        pass

    def finalize_options(self) -> None:
        pass

    def run_isort(self) -> None:
        subprocess.check_call(["isort", "."])

    def run_autoflake(self) -> None:
        subprocess.check_call(
            [
                "autoflake",
                "-i",
                "-r",
                "--remove-all-unused-imports",
                "--remove-duplicate-keys",
                "--remove-unused-variables",
                ".",
            ]
        )

    def run_black(self) -> None:
        subprocess.check_call(["black", "."])

    def run(self) -> None:
        self.run_isort()
        self.run_autoflake()
        self.run_black()


class LintCommand(setuptools.Command):

    description = "Run mypy on python source files"
    user_options: List[Tuple] = []

    def initialize_options(self) -> None:
        pass

    def finalize_options(self) -> None:
        pass

    def run_mypy(self) -> None:
        subprocess.check_call(["mypy", "strview"])

    def run(self) -> None:
        self.run_mypy()


with open("README") as readme:
    documentation = readme.read()

setuptools.setup(
    name="strview",
    version="0.1.0",
    description="Zero-copy views for parsing byte strings",
    long_description=documentation,
    license="Unlicense",
    packages=setuptools.find_packages(),
    cmdclass={
        "format": FormatCommand,
        "lint": LintCommand,
    },
    test_suite="strview.tests",
    python_requires=">=3.7",
    install_requires=[
        "dataclasses-json>=0.3.7",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: Public Domain",
        "Programming Language :: Python",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing",
        "Operating System :: OS Independent",
    ],
)
