from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


def _read_version() -> str:
    """Read `__version__` from the package without importing it.

    Importing would pull in FastAPI before install_requires are satisfied.
    """

    init_py = ROOT / "src" / "rollbook" / "__init__.py"
    for line in init_py.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip('"').strip("'")
    raise RuntimeError(f"__version__ not found in {init_py}")


setup(
    name="rollbook",
    version=_read_version(),
    description="rollbook: minimal in-memory student record registry served over HTTP",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "httpx>=0.27",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    entry_points={
        "console_scripts": [
            "rollbook=rollbook.__main__:main",
        ],
    },
)
