from pathlib import Path
from setuptools import setup, find_packages

BASE_DIR = Path(__file__).parent

# ----------------------------------------------------------------------
# Core version & requirements (the library itself)
# ----------------------------------------------------------------------
version = (BASE_DIR / ".version").read_text().strip()
long_description = (BASE_DIR / "README.md").read_text(encoding="utf-8")
requirements_lib = (BASE_DIR / "requirements_lib.txt").read_text().splitlines()

# ----------------------------------------------------------------------
# API‑specific requirements
# ----------------------------------------------------------------------
requirements_api = (BASE_DIR / "requirements.txt").read_text().splitlines()

# ----------------------------------------------------------------------
# Extras handling
# ----------------------------------------------------------------------
extras = {
    "api": requirements_api,
    "test": requirements_api + ["pytest"],
}

# ----------------------------------------------------------------------
setup(
    name="mx-ids",
    version=version,
    description="CURP and RFC validators with optional REST API and CLI",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    packages=find_packages(
        where=".",
        include=[
            "mx_ids_lib*",
            "mx_ids_api*",
            "mx_ids_cli*",
        ],
        exclude=("tests", "docs"),
    ),
    python_requires=">=3.10",
    install_requires=requirements_lib,
    extras_require=extras,
    entry_points={
        "console_scripts": [
            "mx-ids-validate=mx_ids_cli.validate:main",
            "mx-ids-mask=mx_ids_cli.mask:main",
            "mx-ids-api=mx_ids_api.rest_api:main",
        ]
    },
)
