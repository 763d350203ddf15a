from setuptools import setup, find_packages

setup(
    name="school-admin",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "httpx",
        "pydantic>=2.6",
        "pydantic-settings",
        "python-dotenv",
        "fastapi",
        "uvicorn",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "school-admin=school_admin.cli:main",
        ],
    },
    python_requires=">=3.8",
)
