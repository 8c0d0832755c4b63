from setuptools import setup, find_packages

setup(
    name="vitalcheck",
    version="1.0.0",
    packages=find_packages(include=["vitalcheck", "vitalcheck.*"]),
    package_data={"vitalcheck": ["static/*.html"]},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "alembic",
        "psycopg2-binary",
        "python-jose[cryptography]",
        "passlib[bcrypt]",
        "bcrypt>=4.0.1,<4.1",
        "python-dotenv",
        "pydantic>=2",
        "pydantic-settings",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "vitalcheck=vitalcheck.main:run",
        ],
    },
)
