from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("innosetup", "./src/innosetup/__init__.py")
innosetup = ModuleType(loader.name)
loader.exec_module(innosetup)

setup(
    name="innosetup",
    version=innosetup.__version__,  # type: ignore
    description="Compile Inno Setup scripts with ISCC from Python.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11.0",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests"]),
    package_data={"innosetup": ["bin/*"]},
    entry_points={"console_scripts": ["innosetup=innosetup.cli:main"]},
    install_requires=[
        "appdirs",
        "cyclopts>=4",
        "pydantic>=2",
        "pygit2",
        "PyYAML",
        "rich",
        "watchfiles",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Win32 (MS Windows)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Build Tools",
    ],
)
