from setuptools import setup, find_packages

setup(
    name="music-db",
    version="0.1.0",
    packages=find_packages(include=["music_db", "music_db.*"]),
    install_requires=[
        "fastapi<0.137",
        "sqlalchemy>=2.0,<2.1",
        "psycopg2-binary",
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
        "alembic",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
